"""Products and lists of products."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

NAME_SIZE = 200
DESCRIPTION_SIZE = 300
IMAGE_SIZE = 100

_TEXT_LIMITS = {"name": NAME_SIZE, "description": DESCRIPTION_SIZE}


@dataclass
class Product:
    """A product for sale; ``quantity`` is how many sit in a cart.

    Text fields are cut to their column sizes. After creation a missing
    text value or a price below one leaves the field as it was. A negative
    id is refused.
    """

    id: int = 0
    name: str = ""
    price: int = 0
    description: str = ""
    quantity: int = 0

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError("a product id must not be negative")

    def __setattr__(self, name: str, value: Any) -> None:
        initialised = name in self.__dict__
        if name in _TEXT_LIMITS:
            if value is None:
                if initialised:
                    return
                value = ""
            value = str(value)[: _TEXT_LIMITS[name]]
        elif name == "price" and initialised and value <= 0:
            return
        object.__setattr__(self, name, value)

    def copy(self) -> "Product":
        """Return an independent copy."""
        return dataclasses.replace(self)


class ProductList:
    """An ordered collection of products."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._items: list[Product] = [p for p in products if p is not None]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Product:
        return self._items[index]

    def __repr__(self) -> str:
        return f"ProductList({self._items!r})"

    def add(self, product: Product | None) -> None:
        """Append a product; None is ignored."""
        if product is not None:
            self._items.append(product)

    def diff(self, updated: "ProductList") -> "ProductList":
        """Return copies of the products in ``updated`` missing from this list.

        Products are matched on their id and price.
        """
        known = {(product.id, product.price) for product in self}
        return ProductList(
            product.copy() for product in updated if (product.id, product.price) not in known
        )

    def total(self) -> int:
        """Return the sum of price times quantity over all products."""
        return sum(product.price * product.quantity for product in self)