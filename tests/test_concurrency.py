# tests/test_concurrency.py
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from autoshop.catalog import ecosport
from autoshop.core import OrderIn
from autoshop.errors import ProductNotFoundError
from autoshop.locks import RWLock
from autoshop.models import PRODUCT_TYPE_CAR
from autoshop.store import Store


def _buy(shop, start, buyer, product_id):
    start.wait()
    try:
        return shop.sell_products(OrderIn(
            name=buyer, shipping_address="Lagos", amount_paid=5000000, product_ids=[product_id],
        ))
    except ProductNotFoundError:
        return None


def test_concurrent_last_car():
    shop = Store("Auto Shop", PRODUCT_TYPE_CAR)
    (car_id,) = shop.add_products(ecosport("red"))

    buyers = [f"buyer-{i}" for i in range(8)]
    start = threading.Barrier(len(buyers))
    with ThreadPoolExecutor(max_workers=len(buyers)) as pool:
        results = list(pool.map(lambda b: _buy(shop, start, b, car_id), buyers))

    winners = [o for o in results if o is not None]
    assert len(winners) == 1
    assert shop.available_products() == ([], 0)
    orders, total_paid = shop.orders()
    assert orders == winners
    assert total_paid == 5000000


def test_readers_share_the_lock():
    lock = RWLock()
    inside = threading.Barrier(2, timeout=5)

    def reader():
        with lock.read_locked():
            # both readers must be inside at once to pass the barrier
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert not any(t.is_alive() for t in threads)


def test_writer_excludes_readers():
    lock = RWLock()
    events = []
    lock.acquire_write()

    def reader():
        with lock.read_locked():
            events.append("read")

    t = threading.Thread(target=reader)
    t.start()
    time.sleep(0.05)
    events.append("write done")
    lock.release_write()
    t.join(timeout=5)
    assert events == ["write done", "read"]


def test_release_without_acquire():
    lock = RWLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_interrupted_writer_wakes_readers():
    lock = RWLock()
    lock.acquire_read()
    notified = []
    real_notify_all = lock._cond.notify_all

    def interrupted(timeout=None):
        raise KeyboardInterrupt

    def recording_notify_all():
        notified.append(True)
        real_notify_all()

    lock._cond.wait = interrupted
    lock._cond.notify_all = recording_notify_all
    with pytest.raises(KeyboardInterrupt):
        lock.acquire_write()

    assert notified
    assert lock._writers_waiting == 0
    # a new reader is not held back by the abandoned writer
    lock.acquire_read()
    lock.release_read()
    lock.release_read()
