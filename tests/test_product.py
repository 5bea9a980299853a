import pytest

from boxshop.product import DESCRIPTION_SIZE, NAME_SIZE, Product, ProductList


def test_negative_id_is_rejected():
    with pytest.raises(ValueError):
        Product(id=-1)


def test_fields_are_kept():
    product = Product(3, "Red box", 50, "A red box", 2)
    assert (product.id, product.name, product.price) == (3, "Red box", 50)
    assert (product.description, product.quantity) == ("A red box", 2)


def test_name_and_description_are_truncated():
    product = Product(1, "n" * (NAME_SIZE + 10), 1, "d" * (DESCRIPTION_SIZE + 10))
    assert len(product.name) == NAME_SIZE
    assert len(product.description) == DESCRIPTION_SIZE


def test_non_positive_price_update_is_ignored():
    product = Product(1, "Box", 40)
    product.price = 0
    assert product.price == 40
    product.price = 60
    assert product.price == 60


def test_none_name_update_is_ignored():
    product = Product(1, "Box", 40)
    product.name = None
    assert product.name == "Box"


def test_copy_is_independent():
    product = Product(1, "Box", 40)
    twin = product.copy()
    twin.name = "Other"
    assert product.name == "Box"
    assert twin == Product(1, "Other", 40)


def test_add_ignores_none():
    products = ProductList()
    products.add(Product(1, "Box", 40))
    products.add(None)
    assert len(products) == 1
    assert products[0].name == "Box"


def test_total_of_empty_list_is_zero():
    assert ProductList().total() == 0


def test_total_multiplies_price_by_quantity():
    assert ProductList([Product(1, "Box", 7, "", 1)]).total() == 7
    products = ProductList([Product(1, "A", 3, "", 2), Product(2, "B", 5, "", 1)])
    assert products.total() == 11


def test_diff_returns_new_products_as_copies():
    kept = Product(1, "Box", 40)
    new = Product(2, "Other", 10)
    original = ProductList([kept])
    updated = ProductList([kept.copy(), new])
    diff = original.diff(updated)
    assert list(diff) == [new]
    assert diff[0] is not new


def test_diff_counts_price_change_as_new():
    original = ProductList([Product(1, "Box", 40)])
    updated = ProductList([Product(1, "Box", 45)])
    assert [p.price for p in original.diff(updated)] == [45]


def test_diff_against_empty_original_keeps_all():
    updated = ProductList([Product(1, "A", 1), Product(2, "B", 2)])
    assert list(ProductList().diff(updated)) == list(updated)