"""Menu rating validation."""

import pytest

from cloudeats.domain.ratings import validate_rating


@pytest.mark.parametrize("rating", [1, 3, 5, 4.0, "2"])
def test_accepts_whole_ratings_in_range(rating):
    result = validate_rating(rating)

    assert result.valid is True
    assert result.error is None
    assert result.rating == int(float(rating))


@pytest.mark.parametrize("rating", [6, 0, -1, ""])
def test_rejects_out_of_range(rating):
    result = validate_rating(rating)

    assert result.valid is False
    assert result.error == "Rating must be between 1 and 5"


def test_rejects_decimal_rating():
    result = validate_rating(3.5)

    assert result.valid is False
    assert result.error == "Rating must be a whole number"


def test_rejects_missing_rating():
    result = validate_rating(None)

    assert result.valid is False
    assert result.error == "Rating is required"


@pytest.mark.parametrize("rating", ["five", True, [4], float("nan")])
def test_rejects_non_numbers(rating):
    result = validate_rating(rating)

    assert result.valid is False
    assert result.error == "Rating must be a number"
