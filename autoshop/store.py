# autoshop/store.py
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from .core import Order, OrderIn, _sum_prices
from .errors import (
    EmptyInputError, InsufficientPaymentError, InvalidOrderError,
    InvalidProductError, ProductNotFoundError, UnsupportedProductTypeError
)
from .ids import OrderID, ProductID
from .locks import RWLock
from .models import Product

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _copy(model):
    # Products carry mutable lists and dicts; callers never share them with the catalog.
    return model.model_copy(deep=True)


class Store:
    """In-memory catalog of products in stock and processed orders.

    Queries hold the shared side of the lock; anything that changes the
    catalog holds the exclusive side for the whole call, so validation and
    mutation can never interleave with another writer.
    """

    def __init__(self, name: str, *supported_types: str):
        self.name = name
        self._lock = RWLock()
        self._products: Dict[ProductID, Product] = {}
        self._orders: Dict[OrderID, Order] = {}
        self._supported: Dict[str, bool] = {t: True for t in supported_types if t}

    # ---------------------------
    # Supported product types
    # ---------------------------
    def _is_supported(self, product_type: str) -> bool:
        # No registered types means the gate is open.
        if not self._supported:
            return True
        return self._supported.get(product_type, False)

    def update_products_supported(self, product_type: str, enabled: bool) -> None:
        if not product_type:
            raise EmptyInputError("provide a product type")

        with self._lock.write_locked():
            if not enabled and product_type not in self._supported:
                raise UnsupportedProductTypeError(
                    f"product type {product_type!r} was never supported by {self.name}"
                )
            self._supported[product_type] = enabled

        logger.info("%s: support for %r set to %s", self.name, product_type, enabled)

    def all_supported_products(self) -> Dict[str, bool]:
        with self._lock.read_locked():
            return dict(self._supported)

    # ---------------------------
    # Adding and updating products
    # ---------------------------
    def _check_product(self, product: Optional[Product]) -> None:
        if product is None:
            raise InvalidProductError("invalid product")
        if not product.is_valid():
            raise InvalidProductError(
                f"product {product.name!r} with ID {product.id} is not valid or missing required fields"
            )
        if not self._is_supported(product.product_type):
            raise UnsupportedProductTypeError(
                f"{self.name} does not support product type {product.product_type!r}"
            )

    def add_products(self, *products: Product) -> List[ProductID]:
        """Validate every product, then stock each under a fresh random ID.

        Returns the assigned IDs in the order the products were given.
        """
        if not products:
            raise EmptyInputError("provide one or more products")

        staged = [_copy(p) if p is not None else None for p in products]
        with self._lock.write_locked():
            for product in staged:
                self._check_product(product)

            now = _now()
            product_ids = []
            for product in staged:
                product_id = ProductID.generate()
                while product_id in self._products:
                    product_id = ProductID.generate()
                self._products[product_id] = product.model_copy(
                    update={"id": product_id, "created_at": now, "last_updated": now}
                )
                product_ids.append(product_id)

        logger.info("%s: added %d product(s)", self.name, len(product_ids))
        return product_ids

    def update_product(self, product: Product) -> Product:
        """Replace the in-stock product that has the same ID."""
        if product is None:
            raise InvalidProductError("invalid product")
        if product.id.is_zero():
            raise ProductNotFoundError("product has no ID; add it before updating")
        product = _copy(product)

        with self._lock.write_locked():
            current = self._products.get(product.id)
            if current is None:
                raise ProductNotFoundError(f"product with ID {product.id} does not exist")
            self._check_product(product)

            updated = product.model_copy(
                update={"created_at": current.created_at, "last_updated": _now()}
            )
            self._products[product.id] = updated

        logger.info("%s: updated product %s", self.name, product.id)
        return _copy(updated)

    # ---------------------------
    # Selling
    # ---------------------------
    def sell_products(self, order_in: OrderIn) -> Order:
        """Sell every listed product to one buyer, or nothing at all."""
        if order_in is None:
            raise InvalidOrderError("order is missing required fields")
        missing = order_in.missing_fields()
        if missing:
            raise InvalidOrderError(f"order is missing required fields: {', '.join(missing)}")
        if len(set(order_in.product_ids)) != len(order_in.product_ids):
            raise InvalidOrderError("order lists the same product more than once")

        with self._lock.write_locked():
            products = []
            for product_id in order_in.product_ids:
                product = self._products.get(product_id)
                if product is None:
                    logger.warning("%s: rejected sale, product %s not in stock", self.name, product_id)
                    raise ProductNotFoundError(f"product with ID {product_id} does not exist")
                if not product.is_valid():
                    raise InvalidProductError(f"product with ID {product_id} is not valid")
                if not self._is_supported(product.product_type):
                    raise UnsupportedProductTypeError(
                        f"{self.name} no longer sells product type {product.product_type!r}"
                    )
                products.append(product)

            total = _sum_prices(products)
            if order_in.amount_paid < total:
                logger.warning(
                    "%s: rejected sale to %s, paid %.2f of %.2f",
                    self.name, order_in.name, order_in.amount_paid, total,
                )
                raise InsufficientPaymentError(total, order_in.amount_paid)

            # Commit
            for product in products:
                del self._products[product.id]

            order_id = OrderID.generate()
            while order_id in self._orders:
                order_id = OrderID.generate()
            order = Order(
                id=order_id,
                name=order_in.name,
                shipping_address=order_in.shipping_address,
                amount_paid=order_in.amount_paid,
                products=tuple(products),
                created_at=_now(),
            )
            self._orders[order_id] = order

        logger.info(
            "%s: order %s recorded, %d product(s) for %.2f",
            self.name, order.id, len(order.products), order.amount_paid,
        )
        return _copy(order)

    # ---------------------------
    # Queries
    # ---------------------------
    def product(self, product_id: ProductID) -> Optional[Product]:
        with self._lock.read_locked():
            product = self._products.get(product_id)
        return _copy(product) if product is not None else None

    def order(self, order_id: OrderID) -> Optional[Order]:
        with self._lock.read_locked():
            order = self._orders.get(order_id)
        return _copy(order) if order is not None else None

    def available_products(self, product_type: str = "") -> Tuple[List[Product], float]:
        """In-stock products of product_type (all when empty) and their total price."""
        with self._lock.read_locked():
            products = [
                _copy(p) for p in self._products.values()
                if not product_type or p.product_type == product_type
            ]
        return products, _sum_prices(products)

    def sold_products(self, product_type: str = "") -> Tuple[List[Product], float]:
        """Products across every processed order, filtered like available_products."""
        with self._lock.read_locked():
            products = [
                _copy(p) for order in self._orders.values() for p in order.products
                if not product_type or p.product_type == product_type
            ]
        return products, _sum_prices(products)

    def orders(self) -> Tuple[List[Order], float]:
        with self._lock.read_locked():
            orders = [_copy(o) for o in self._orders.values()]
        return orders, sum(o.amount_paid for o in orders)

    def in_stock(self, product_type: str) -> bool:
        with self._lock.read_locked():
            return any(p.product_type == product_type for p in self._products.values())

    # ---------------------------
    # Deleting
    # ---------------------------
    def delete_products(self, *product_ids: ProductID) -> int:
        """Remove the given in-stock products. Unknown IDs are skipped."""
        if not product_ids:
            raise EmptyInputError("provide one or more product IDs")

        deleted = 0
        with self._lock.write_locked():
            for product_id in product_ids:
                if self._products.pop(product_id, None) is not None:
                    deleted += 1

        logger.info("%s: deleted %d product(s)", self.name, deleted)
        return deleted
