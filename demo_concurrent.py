from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from rich import print

from autoshop.catalog import ecosport, new_auto_shop
from autoshop.config import settings
from autoshop.core import OrderIn
from autoshop.errors import ProductNotFoundError, StoreError
from autoshop.logs import setup_logging


def simulate_purchase(shop, start: Barrier, buyer: str, product_id, amount: float):
    start.wait()
    try:
        order = shop.sell_products(OrderIn(
            name=buyer,
            shipping_address=f"{buyer}'s garage, Lagos",
            amount_paid=amount,
            product_ids=[product_id],
        ))
        print(f"✅ {buyer} bought the car (Order ID: {order.id}, Total: {order.total:.2f} {settings.CURRENCY})")
        return order
    except ProductNotFoundError:
        print(f"❌ {buyer} order failed: car already sold.")
    except StoreError as e:
        print(f"❌ {buyer} order failed with error: {e.detail}")
    return None


def main():
    setup_logging(settings.LOG_LEVEL)
    shop = new_auto_shop()

    car = ecosport("red")
    (car_id,) = shop.add_products(car)
    print(f"\n🚗 Stocked {car.name} ({car.color}) as {car_id}")

    buyers = [f"buyer-{i}" for i in range(1, max(settings.BUYER_THREADS, 1) + 1)]
    start = Barrier(len(buyers))

    print("\n⚡ Simulating concurrent purchases...")
    with ThreadPoolExecutor(max_workers=len(buyers)) as pool:
        futures = [
            pool.submit(simulate_purchase, shop, start, buyer, car_id, car.price)
            for buyer in buyers
        ]
        results = [f.result() for f in futures]

    winners = [o for o in results if o is not None]
    available, _ = shop.available_products()
    orders, total_paid = shop.orders()
    print(f"\n📦 Winners: {len(winners)}, still in stock: {len(available)}")
    print(f"🧾 Orders: {len(orders)} totalling {total_paid:.2f} {settings.CURRENCY}")


if __name__ == "__main__":
    main()
