# tests/test_models.py
import pytest
from pydantic import ValidationError

from autoshop.catalog import door_lights, ecosport
from autoshop.core import Order, OrderIn
from autoshop.ids import OrderID, ProductID, ZERO_PRODUCT_ID
from autoshop.models import Car, PRODUCT_TYPE_CAR, PRODUCT_TYPE_CAR_ACCESSORY, Product


def test_ids_are_fixed_size_random_and_hex():
    a, b = ProductID.generate(), ProductID.generate()
    assert len(a) == 16 and len(OrderID.generate()) == 12
    assert a != b
    assert str(a) == a.hex() and len(str(a)) == 32
    assert ProductID.from_hex(str(a)) == a
    assert {a: 1}[ProductID.from_hex(str(a))] == 1


def test_zero_id():
    assert ZERO_PRODUCT_ID.is_zero()
    assert ProductID() == ZERO_PRODUCT_ID
    assert not ProductID.generate().is_zero()


def test_from_hex_rejects_garbage():
    with pytest.raises(ValueError):
        ProductID.from_hex("not-hex")
    with pytest.raises(ValueError):
        ProductID.from_hex("abcd")
    with pytest.raises(ValueError):
        OrderID.from_hex(str(ProductID.generate()))


def test_sample_products_are_valid():
    assert ecosport("yellow").is_valid()
    assert ecosport("yellow").product_type == PRODUCT_TYPE_CAR
    assert door_lights().is_valid()
    assert door_lights().product_type == PRODUCT_TYPE_CAR_ACCESSORY


def test_car_needs_make_model_and_color():
    car = ecosport("yellow")
    for field in ("make", "model", "color"):
        assert not car.model_copy(update={field: ""}).is_valid()
    # year is optional
    assert car.model_copy(update={"year": ""}).is_valid()


def test_empty_product_is_invalid():
    assert not Product().is_valid()
    assert not Car().is_valid()


def test_products_are_frozen():
    car = ecosport("yellow")
    with pytest.raises(ValidationError):
        car.price = 1


def test_order_total_and_missing_fields():
    products = (ecosport("yellow"), door_lights())
    order = Order(name="Philemon", shipping_address="Lagos", amount_paid=5014000, products=products)
    assert order.total == 5014000

    assert OrderIn().missing_fields() == ["name", "shipping_address", "amount_paid", "product_ids"]
    assert OrderIn(name="a", shipping_address="b", amount_paid=1,
                   product_ids=[ProductID.generate()]).missing_fields() == []
