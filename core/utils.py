import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

logger = logging.getLogger(__name__)

SCORE_MIN = Decimal("0")
SCORE_MAX = Decimal("100")
_TWO_PLACES = Decimal("0.01")

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal through str() so floats keep their printed value (0.1 -> 0.1, not 0.1000000000000000055...)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_score(value: Number) -> Decimal:
    """Clamp to [0, 100] and round half-up to two decimal places.

    Args:
        value: Raw score

    Returns:
        Score as a Decimal such as Decimal("72.50")
    """
    score = to_decimal(value)
    if score < SCORE_MIN or score > SCORE_MAX:
        logger.debug(f"Score out of range: {score}, clamping to [0, 100]")
        score = max(SCORE_MIN, min(SCORE_MAX, score))
    return score.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
