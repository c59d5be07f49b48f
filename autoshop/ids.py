# autoshop/ids.py
import secrets


class _OpaqueID(bytes):
    """Fixed-size random identity. Displays as lowercase hex."""

    size = 0

    def __new__(cls, value: bytes = b""):
        if not value:
            value = bytes(cls.size)
        if len(value) != cls.size:
            raise ValueError(f"{cls.__name__} must be {cls.size} bytes, got {len(value)}")
        return super().__new__(cls, value)

    @classmethod
    def generate(cls):
        return cls(secrets.token_bytes(cls.size))

    @classmethod
    def from_hex(cls, text: str):
        try:
            raw = bytes.fromhex(text.strip())
        except ValueError:
            raise ValueError(f"invalid {cls.__name__}: {text!r}") from None
        return cls(raw)

    def is_zero(self) -> bool:
        return not any(self)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.hex()}')"


class ProductID(_OpaqueID):
    size = 16


class OrderID(_OpaqueID):
    size = 12


ZERO_PRODUCT_ID = ProductID()
ZERO_ORDER_ID = OrderID()
