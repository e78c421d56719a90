"""
Unit tests for location analysis.
"""

import math

import pytest

from src.models.location import AnalysisResult, Location, LocationMetadata, MergedLocation
from src.pipeline.analysis import (
    analyze_locations,
    find_incomplete_data,
    find_location_with_most_reviews,
    round_rating,
)
from src.pipeline.merge import merge_location_data


def make_record(record_id, category=None, rating=0, reviews=0):
    """Build a merged record; no category means no metadata."""
    location = Location(id=record_id, latitude=0, longitude=0)
    if category is None:
        return MergedLocation(location=location)
    return MergedLocation(
        location=location,
        metadata=LocationMetadata(id=record_id, type=category, rating=rating, reviews=reviews)
    )


@pytest.fixture
def merged(locations, metadata):
    return merge_location_data(locations, metadata)


def test_worked_example(merged):
    """Test the two-location example end to end."""
    assert analyze_locations(merged) == [
        AnalysisResult(type="park", count=1, average_rating=4.0, total_reviews=10)
    ]
    assert find_location_with_most_reviews(merged).id == "a"
    assert [record.id for record in find_incomplete_data(merged)] == ["b"]


def test_no_metadata(locations):
    """Test outputs when no location has metadata."""
    merged = merge_location_data(locations, [])

    assert analyze_locations(merged) == []
    assert find_location_with_most_reviews(merged) is None
    assert find_incomplete_data(merged) == merged


def test_category_aggregation():
    """Test count, average and total per category."""
    records = [
        make_record("1", "cafe", rating=4, reviews=10),
        make_record("2", "park", rating=5, reviews=3),
        make_record("3"),
        make_record("4", "cafe", rating=3, reviews=7),
        make_record("5", "cafe", rating=3, reviews=0)
    ]

    results = analyze_locations(records)

    assert [result.type for result in results] == ["cafe", "park"]  # First-seen order
    cafe = results[0]
    assert cafe.count == 3
    assert cafe.average_rating == 3.3
    assert cafe.total_reviews == 17
    assert results[1] == AnalysisResult(type="park", count=1, average_rating=5.0, total_reviews=3)


def test_counts_sum_to_complete_records():
    """Test that category counts cover every complete record exactly once."""
    records = [
        make_record(str(i), category, rating=i % 5, reviews=i)
        for i, category in enumerate(["a", "b", None, "a", "c", None, "b", "a"])
    ]

    results = analyze_locations(records)

    assert sum(result.count for result in results) == 6
    assert all(result.count > 0 for result in results)
    assert {result.type: result.count for result in results} == {"a": 3, "b": 2, "c": 1}


@pytest.mark.parametrize("value, expected", [
    (4.0, 4.0),
    (3.3333333, 3.3),
    (0.25, 0.3),  # Exact tie rounds away from zero
    (0.75, 0.8),
    (-0.25, -0.3),
    (0.35, 0.3),  # Stored slightly below 0.35
    (4.96, 5.0),
    (1.7e308, 1.7e308),  # Needs more digits than the default context
    (math.inf, math.inf),
    (-math.inf, -math.inf)
])
def test_round_rating(value, expected):
    """Test one-decimal rounding."""
    assert round_rating(value) == expected


def test_round_rating_nan():
    assert math.isnan(round_rating(math.nan))


def test_average_uses_half_away_from_zero():
    """Test that an exact .x5 average rounds up."""
    records = [
        make_record("1", "museum", rating=0, reviews=1),
        make_record("2", "museum", rating=0.5, reviews=1)
    ]

    assert analyze_locations(records)[0].average_rating == 0.3


def test_most_reviewed_strict_maximum():
    """Test that the greatest review count wins."""
    records = [
        make_record("1", "cafe", reviews=5),
        make_record("2"),
        make_record("3", "park", reviews=50),
        make_record("4", "cafe", reviews=20)
    ]

    assert find_location_with_most_reviews(records).id == "3"


def test_most_reviewed_tie_keeps_earliest():
    """Test that ties resolve to the first record."""
    records = [
        make_record("1"),
        make_record("2", "cafe", reviews=30),
        make_record("3", "park", reviews=30),
        make_record("4", "cafe", reviews=10)
    ]

    assert find_location_with_most_reviews(records).id == "2"


def test_most_reviewed_negative_counts():
    """Test that negative review counts still compare correctly."""
    records = [
        make_record("1", "cafe", reviews=-5),
        make_record("2", "cafe", reviews=-1)
    ]

    assert find_location_with_most_reviews(records).id == "2"


def test_most_reviewed_empty():
    assert find_location_with_most_reviews([]) is None


def test_incomplete_is_complement_in_order():
    """Test that incomplete data is exactly the records without metadata."""
    records = [
        make_record("1"),
        make_record("2", "cafe"),
        make_record("3"),
        make_record("4", "park"),
        make_record("5")
    ]

    incomplete = find_incomplete_data(records)

    assert [record.id for record in incomplete] == ["1", "3", "5"]
    complete_ids = {record.id for record in records if record.is_complete}
    assert complete_ids.isdisjoint(record.id for record in incomplete)


def test_analysis_does_not_mutate_input(merged):
    """Test that the three passes leave the merged list untouched."""
    before = list(merged)

    analyze_locations(merged)
    find_location_with_most_reviews(merged)
    find_incomplete_data(merged)

    assert merged == before


@pytest.mark.parametrize("ratings, expected", [
    ([1e400], math.inf),  # Literal beyond float range
    ([1.7e308, 1.7e308], math.inf),  # Finite ratings whose sum overflows
    ([10 ** 400], math.inf),  # Integer too large for a float
    ([10 ** 400, 1.5], math.inf),  # Huge integer mixed with a float
    ([-(10 ** 400)], -math.inf),
    ([1e30, 3e30], 2e30)
])
def test_average_rating_at_float_limits(ratings, expected):
    """Test that extreme ratings aggregate without raising."""
    records = [
        make_record(str(i), "tower", rating=rating, reviews=1)
        for i, rating in enumerate(ratings)
    ]

    result = analyze_locations(records)[0]

    assert result.count == len(ratings)
    assert result.average_rating == expected


def test_average_rating_nan_from_opposite_infinities():
    """Test that +inf and -inf ratings average to NaN."""
    records = [
        make_record("1", "tower", rating=1e400, reviews=1),
        make_record("2", "tower", rating=-1e400, reviews=1)
    ]

    assert math.isnan(analyze_locations(records)[0].average_rating)


@pytest.mark.parametrize("reviews, expected", [
    ([10 ** 400, 1], 10 ** 400 + 1),  # Integer sums stay exact
    ([10 ** 400, 0.5], math.inf),
    ([1.7e308, 1.7e308], math.inf)
])
def test_total_reviews_at_float_limits(reviews, expected):
    """Test that extreme review counts sum without raising."""
    records = [
        make_record(str(i), "tower", rating=4, reviews=count)
        for i, count in enumerate(reviews)
    ]

    assert analyze_locations(records)[0].total_reviews == expected


def test_most_reviewed_with_huge_counts():
    """Test comparing huge integer and infinite review counts."""
    records = [
        make_record("1", "tower", reviews=10 ** 400),
        make_record("2", "tower", reviews=1e400),
        make_record("3", "tower", reviews=1e308)
    ]

    assert find_location_with_most_reviews(records).id == "2"



# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
