from datetime import date

from errors import InsufficientStock


#catalog item model
class CatalogItem:
    """A product on sale. Perishable and shippable are optional capabilities:
    an item may carry an expiry date, a weight, both, or neither.
    """

    def __init__(self, name, price, stock, expiry_date=None, weight=None):
        if price < 0:
            raise ValueError(f"price must be >= 0, got {price}")
        if stock < 0:
            raise ValueError(f"stock must be >= 0, got {stock}")
        if weight is not None and weight <= 0:
            raise ValueError(f"weight must be > 0, got {weight}")
        self.name = name
        self.price = price
        self.stock = stock
        self.expiry_date = expiry_date
        self.weight = weight  # kg

    @property
    def is_perishable(self):
        return self.expiry_date is not None

    @property
    def is_shippable(self):
        return self.weight is not None

    def is_expired(self, today=None):
        if not self.is_perishable:
            return False
        today = today or date.today()
        return self.expiry_date < today

    def reduce_stock(self, qty):
        if qty > self.stock:
            raise ValueError(f"cannot take {qty} of {self.name}, only {self.stock} on hand")
        self.stock -= qty

    def __repr__(self):
        return f"CatalogItem({self.name!r}, price={self.price}, stock={self.stock})"


#account model
class Account:
    def __init__(self, name, balance):
        if balance < 0:
            raise ValueError(f"balance must be >= 0, got {balance}")
        self.name = name
        self.balance = balance

    def can_afford(self, amount):
        return self.balance >= amount

    def deduct(self, amount):
        self.balance -= amount


#cart entry model
class CartEntry:
    # holds the item itself so price and stock are always read live
    def __init__(self, item, qty):
        self.item = item
        self.qty = qty

    @property
    def line_total(self):
        return self.item.price * self.qty


#cart model
class Cart:
    def __init__(self):
        self.items = []

    def add(self, item, qty=1):
        if qty <= 0:
            raise ValueError(f"quantity must be > 0, got {qty}")
        if qty > item.stock:
            raise InsufficientStock(item.name, qty, item.stock)
        self.items.append(CartEntry(item, qty))

    def remove(self, name):
        self.items = [entry for entry in self.items if entry.item.name != name]

    def clear(self):
        self.items = []

    def is_empty(self):
        return len(self.items) == 0

    def subtotal(self):
        return sum(entry.line_total for entry in self.items)

    @property
    def total(self):
        return self.subtotal()

    def shippable_units(self):
        """One reference per purchased unit of every shippable item."""
        units = []
        for entry in self.items:
            if entry.item.is_shippable:
                units.extend([entry.item] * entry.qty)
        return units

    def __len__(self):
        return len(self.items)
