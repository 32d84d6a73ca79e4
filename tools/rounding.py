import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """
    Round with ties going up (1642.5 -> 1643, 893.75 -> 894, 22.85 -> 22.9).

    Builtin round() rounds ties to even, so it is not used for displayed figures.
    Decimals are taken from the exact binary value of the float, the way a
    browser's toFixed() reads it (1.15 is stored just below 1.15 -> 1.1).

    Returns:
        int when ndigits == 0, else a float with `ndigits` decimals.
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))
    quantum = Decimal(1).scaleb(-ndigits)
    try:
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # too many digits for the decimal context; nothing left to round
        return round(value, ndigits)
