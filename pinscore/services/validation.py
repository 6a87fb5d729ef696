import numbers
from typing import Any

from ..exceptions import InvalidPins

MIN_PINS = 0
MAX_PINS = 10


def validate_pins(raw: Any) -> int:
    """Return ``raw`` as a pin count in ``MIN_PINS..MAX_PINS``.

    Rules:
    - Booleans are rejected (``bool`` is a subclass of ``int`` in Python)
    - Integers and integral values such as ``"7"``, ``7.0`` or
      ``Decimal("7")`` are accepted
    - Non-integral numbers (``7.5``, ``Fraction(19, 2)``, ``Decimal("7.5")``)
      are rejected rather than truncated
    - Anything else, or a value outside the range, raises ``InvalidPins``
    """

    if isinstance(raw, bool):
        raise InvalidPins(raw, "pins must be an integer (not a boolean)")

    if isinstance(raw, numbers.Number) and not isinstance(raw, numbers.Integral):
        try:
            value = int(raw)
        except (TypeError, ValueError, OverflowError):
            raise InvalidPins(raw, "pins must be a whole number") from None
        if value != raw:
            raise InvalidPins(raw, "pins must be a whole number")
    else:
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise InvalidPins(raw, "pins must be an integer") from None

    if not MIN_PINS <= value <= MAX_PINS:
        raise InvalidPins(raw)
    return value
