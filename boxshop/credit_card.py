"""Credit cards used to pay for a cart."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .validation import validate_length

NUMBER_SIZE = 20
EXP_DATE_SIZE = 10
OWNER_SIZE = 200
CSV_SIZE = 3

_TEXT_LIMITS = {
    "number": NUMBER_SIZE,
    "expiration_date": EXP_DATE_SIZE,
    "csv": CSV_SIZE,
    "owner": OWNER_SIZE,
}


@dataclass
class CreditCard:
    """A card tied to the cart it pays for.

    Text fields are cut to their column sizes; after creation a missing
    value leaves a field as it was.
    """

    cart_id: int = 0
    number: str = ""
    expiration_date: str = ""
    csv: str = ""
    owner: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _TEXT_LIMITS:
            if value is None:
                if name in self.__dict__:
                    return
                value = ""
            value = str(value)[: _TEXT_LIMITS[name]]
        object.__setattr__(self, name, value)


def make_credit_card(
    cart_id: int,
    number: str | None,
    date: str | None,
    csv: str | None,
    owner: str | None,
) -> CreditCard:
    """Create a card, raising ValueError when a field is missing or too long."""
    checks = (
        ("number", number, NUMBER_SIZE),
        ("expiration date", date, EXP_DATE_SIZE),
        ("owner", owner, OWNER_SIZE),
        ("security code", csv, CSV_SIZE),
    )
    for label, value, limit in checks:
        if not validate_length(value, limit):
            raise ValueError(f"card {label} is missing or longer than {limit}")
    return CreditCard(cart_id, number, date, csv, owner)