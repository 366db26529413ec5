from datetime import date, timedelta

from models import CatalogItem


class Catalog:
    """Owns catalog items by name. Carts reference the items held here."""

    def __init__(self, items=()):
        self._items = {}
        for item in items:
            self.add(item)

    def add(self, item):
        if item.name in self._items:
            raise ValueError(f"duplicate product name: {item.name}")
        self._items[item.name] = item
        return item

    def get(self, name):
        try:
            return self._items[name]
        except KeyError:
            raise KeyError(f"no such product: {name}") from None

    def list_products(self):
        return sorted(self._items.values(), key=lambda item: item.name)

    def restock(self, name, qty):
        if qty <= 0:
            raise ValueError(f"restock quantity must be > 0, got {qty}")
        item = self.get(name)
        item.stock += qty
        return item

    def __contains__(self, name):
        return name in self._items

    def __iter__(self):
        return iter(self.list_products())

    def __len__(self):
        return len(self._items)


def demo_catalog(today=None):
    today = today or date.today()
    return Catalog([
        CatalogItem("Cheese", 100, 10, expiry_date=today + timedelta(days=1), weight=0.2),
        CatalogItem("Biscuits", 150, 5, expiry_date=today + timedelta(days=3)),
        CatalogItem("TV", 400, 3, weight=0.7),
        CatalogItem("Scratch Card", 50, 20),
    ])
