# autoshop/models.py
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .ids import ProductID, ZERO_PRODUCT_ID

PRODUCT_TYPE_CAR = "Car"
PRODUCT_TYPE_CAR_ACCESSORY = "Car Accessory"


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: ProductID = ZERO_PRODUCT_ID
    name: str = ""
    price: float = 0
    product_type: str = ""
    category: str = ""
    description: str = ""
    images: List[str] = Field(default_factory=list)
    specifications: Dict[str, List[str]] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    def is_valid(self) -> bool:
        """True when every required field is set and the price is positive."""
        return bool(
            self.name and self.product_type and self.description
            and self.price > 0 and self.images and self.specifications
        )


class Car(Product):
    product_type: str = PRODUCT_TYPE_CAR
    make: str = ""
    model: str = ""
    color: str = ""
    year: str = ""

    def is_valid(self) -> bool:
        return super().is_valid() and bool(self.make and self.model and self.color)


class CarAccessory(Product):
    product_type: str = PRODUCT_TYPE_CAR_ACCESSORY
