"""Shopping carts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PAY_DATE_SIZE = 15
EMAIL_SIZE = 100
UNPAID = "-1"

_TEXT_LIMITS = {"pay_date": PAY_DATE_SIZE, "email": EMAIL_SIZE}


@dataclass
class Cart:
    """A user's cart; ``pay_date`` is ``UNPAID`` until the cart is paid.

    Text fields are cut to their column sizes. After creation, an id below
    one, a negative amount or a missing text value leaves the field as it
    was; at creation a negative amount becomes zero.
    """

    id: int = 0
    pay_date: str = ""
    email: str = ""
    amount: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        initialised = name in self.__dict__
        if name in _TEXT_LIMITS:
            if value is None:
                if initialised:
                    return
                value = ""
            value = str(value)[: _TEXT_LIMITS[name]]
        elif name == "id":
            if initialised and value <= 0:
                return
        elif name == "amount":
            if value < 0:
                if initialised:
                    return
                value = 0
        object.__setattr__(self, name, value)