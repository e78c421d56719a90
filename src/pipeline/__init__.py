"""
Pipeline stages for LocationPulse.

Each stage is a set of pure functions over the previous stage's output:
- Validation (raw JSON text -> typed collections)
- Merge (locations + metadata -> merged records)
- Analysis (category stats, most reviewed, incomplete data)
"""
