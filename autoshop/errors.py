# autoshop/errors.py


class StoreError(Exception):
    """Base class for every failure a Store operation reports."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class EmptyInputError(StoreError):
    pass


class InvalidProductError(StoreError):
    pass


class InvalidOrderError(StoreError):
    pass


class ProductNotFoundError(StoreError):
    pass


class UnsupportedProductTypeError(StoreError):
    pass


class InsufficientPaymentError(StoreError):
    def __init__(self, required: float, paid: float):
        super().__init__(
            f"order amount paid is not enough, need {required:.2f} but paid {paid:.2f}"
        )
        self.required = required
        self.paid = paid
