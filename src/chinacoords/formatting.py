"""Rendering coordinates back to text."""

from chinacoords.models import Coordinate

DEFAULT_FRACTION_DIGITS = 6


def format_coordinate(
    coord: Coordinate, fraction_digits: int | None = DEFAULT_FRACTION_DIGITS
) -> str:
    """
    Render *coord* as '<lat>,<lng>'.

    Each value is rounded to *fraction_digits* decimals. Passing 0 (or None)
    disables rounding and renders each float by its repr, so a whole
    number keeps its trailing ".0" (31.0, not 31).
    """
    if not fraction_digits:
        return f"{coord.lat!r},{coord.lng!r}"
    if fraction_digits < 0:
        raise ValueError(
            f"fraction_digits must be non-negative, got {fraction_digits}"
        )
    return f"{coord.lat:.{fraction_digits}f},{coord.lng:.{fraction_digits}f}"
