# cloudeats/domain/ratings.py
from dataclasses import dataclass
from numbers import Real

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class RatingValidation:
    valid: bool
    error: str | None = None
    rating: int | None = None


def _as_number(value) -> float | None:
    #bool is an int subclass, never a rating
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return None
    return None


def validate_rating(value) -> RatingValidation:
    """
    Validates a menu item rating.

    Accepts whole numbers from 1 to 5, numeric strings are coerced first
    ("4" is valid, "five" is not).
    """
    if value is None:
        return RatingValidation(False, "Rating is required")

    rating = _as_number(value)

    if rating is None or rating != rating:  # NaN
        return RatingValidation(False, "Rating must be a number")

    if rating < MIN_RATING or rating > MAX_RATING:
        return RatingValidation(False, f"Rating must be between {MIN_RATING} and {MAX_RATING}")

    if not rating.is_integer():
        return RatingValidation(False, "Rating must be a whole number")

    return RatingValidation(True, rating=int(rating))
