"""
Configuration settings for autoshop.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Settings loaded from environment variables."""

    def __init__(self):
        self.STORE_NAME: str = os.getenv("STORE_NAME", "Auto Shop")
        self.CURRENCY: str = os.getenv("CURRENCY", "NGN")
        self.SUPPORTED_PRODUCT_TYPES: str = os.getenv("SUPPORTED_PRODUCT_TYPES", "Car,Car Accessory")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
        self.BUYER_THREADS: int = int(os.getenv("BUYER_THREADS", "4"))

    @property
    def supported_product_types(self) -> List[str]:
        """Parsed SUPPORTED_PRODUCT_TYPES, blanks dropped."""
        return [t.strip() for t in self.SUPPORTED_PRODUCT_TYPES.split(",") if t.strip()]


settings = Settings()
