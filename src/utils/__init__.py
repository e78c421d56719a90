"""
Utility modules for LocationPulse.

Cross-cutting concerns:
- Storage: File I/O for raw inputs and exported reports
"""
