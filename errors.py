"""Checkout errors."""


class CheckoutError(Exception):
    """Base exception for every checkout failure."""

    pass


class InsufficientStock(CheckoutError):
    """Raised when a requested quantity exceeds what is on hand."""

    def __init__(self, name, requested, available):
        self.name = name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough stock for product: {name} (requested {requested}, available {available})"
        )


class ExpiredProduct(CheckoutError):
    """Raised when a perishable item in the cart is past its expiry date."""

    def __init__(self, name, expiry_date):
        self.name = name
        self.expiry_date = expiry_date
        super().__init__(f"{name} is expired (expired on {expiry_date.isoformat()}).")


class EmptyCart(CheckoutError):
    def __init__(self):
        super().__init__("Cart is empty.")


class InsufficientBalance(CheckoutError):
    """Raised when the account cannot cover the checkout total."""

    def __init__(self, required, balance):
        self.required = required
        self.balance = balance
        super().__init__(f"Insufficient balance: total is {required}, balance is {balance}.")
