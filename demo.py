#!/usr/bin/env python
import sys

from rich import print

from autoshop.catalog import door_lights, ecosport, new_auto_shop
from autoshop.config import settings
from autoshop.core import OrderIn
from autoshop.errors import StoreError
from autoshop.logs import setup_logging
from autoshop.models import PRODUCT_TYPE_CAR, PRODUCT_TYPE_CAR_ACCESSORY


def run():
    shop = new_auto_shop()
    cur = settings.CURRENCY

    # -----------------------------
    # Stock the shop
    # -----------------------------
    yellow, black, lights = ecosport("yellow"), ecosport("black"), door_lights()
    yellow_id, black_id, lights_id = shop.add_products(yellow, black, lights)

    products, total = shop.available_products()
    print(f"{shop.name} has {len(products)} products available that cost a total of {total:.2f} {cur}")

    # -----------------------------
    # Sell a car and an accessory
    # -----------------------------
    order = shop.sell_products(OrderIn(
        name="Philemon",
        shipping_address="No 21 Alt_School Africa street, Banana Island, Lagos",
        amount_paid=yellow.price + lights.price,
        product_ids=[yellow_id, lights_id],
    ))
    print(f"Order {order.id} placed for {order.name}, total {order.total:.2f} {cur}")

    # -----------------------------
    # Sold and available inventory
    # -----------------------------
    sold, total = shop.sold_products()
    print(f"{shop.name} has sold {len(sold)} products at {total:.2f} {cur}")

    sold_cars, total = shop.sold_products(PRODUCT_TYPE_CAR)
    print(f"{shop.name} has sold {len(sold_cars)} {PRODUCT_TYPE_CAR} at {total:.2f} {cur}")

    cars, total = shop.available_products(PRODUCT_TYPE_CAR)
    print(f"{shop.name} has {len(cars)} {PRODUCT_TYPE_CAR} available that cost a total of {total:.2f} {cur}")

    orders, total_paid = shop.orders()
    print(f"{shop.name} has processed {len(orders)} orders totalling {total_paid:.2f} {cur}")

    # -----------------------------
    # Stock checks
    # -----------------------------
    for product_type in (PRODUCT_TYPE_CAR, PRODUCT_TYPE_CAR_ACCESSORY):
        print(f"{shop.name} has a {product_type} in stock: {shop.in_stock(product_type)}")

    print(f"Product with id {yellow_id} is available: {shop.product(yellow_id) is not None}")
    print(f"Product with id {black_id} is available: {shop.product(black_id) is not None}")

    # -----------------------------
    # Store settings
    # -----------------------------
    shop.update_products_supported("Spare Parts", True)
    shop.update_products_supported(PRODUCT_TYPE_CAR_ACCESSORY, False)
    for product_type, enabled in shop.all_supported_products().items():
        print(f"{shop.name} currently has support for {product_type}: {enabled}")

    # -----------------------------
    # Clean up
    # -----------------------------
    deleted = shop.delete_products(yellow_id, black_id, lights_id)
    print(f"Deleted {deleted} products from {shop.name}")


def main():
    setup_logging(settings.LOG_LEVEL)
    try:
        run()
    except StoreError as e:
        print(f"[red]{e.detail}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
