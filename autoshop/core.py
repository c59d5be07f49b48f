# autoshop/core.py
from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .ids import OrderID, ProductID, ZERO_ORDER_ID
from .models import Product


def _sum_prices(products) -> float:
    return sum(p.price for p in products)


class OrderIn(BaseModel):
    """A buyer's request to purchase in-stock products."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = ""
    shipping_address: str = ""
    amount_paid: float = 0
    product_ids: List[ProductID] = Field(default_factory=list)

    def missing_fields(self) -> List[str]:
        missing = []
        if not self.name:
            missing.append("name")
        if not self.shipping_address:
            missing.append("shipping_address")
        if self.amount_paid <= 0:
            missing.append("amount_paid")
        if not self.product_ids:
            missing.append("product_ids")
        return missing


class Order(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: OrderID = ZERO_ORDER_ID
    name: str
    shipping_address: str
    amount_paid: float
    products: Tuple[Product, ...]
    created_at: Optional[datetime] = None

    @property
    def total(self) -> float:
        return _sum_prices(self.products)
