import sys
from datetime import date

from errors import EmptyCart, ExpiredProduct, InsufficientBalance, InsufficientStock
from model import ReceiptGenerator
from models import Cart
from transactions import CheckoutRecord, settle

SHIPPING_FEE = 30
SHIPMENT_HEADER = "** Shipment notice **"


#Cart service
class CartService:
    def __init__(self):
        self.cart = Cart()

    def add_to_cart(self, item, qty=1):
        self.cart.add(item, qty)

    def remove_from_cart(self, name):
        self.cart.remove(name)

    def clear_cart(self):
        self.cart.clear()

    def get_items(self):
        return self.cart.items

    def get_total(self):
        return self.cart.total


#Shipping service
class ManifestLine:
    def __init__(self, name, count, grams):
        self.name = name
        self.count = count
        self.grams = grams


class Manifest:
    def __init__(self, lines, total_weight):
        self.lines = lines
        self.total_weight = total_weight  # kg, unrounded

    def text_lines(self):
        out = [SHIPMENT_HEADER]
        for line in self.lines:
            out.append(f"{line.count}x {line.name}")
            out.append(f"{line.grams}g")
        out.append(f"Total package weight {self.total_weight!r}kg")
        return out


class ShippingService:

    @staticmethod
    def build_manifest(units):
        # grouped by name, first-seen order
        counts = {}
        weights = {}
        total_weight = 0.0
        for unit in units:
            counts[unit.name] = counts.get(unit.name, 0) + 1
            weights[unit.name] = unit.weight
            total_weight += unit.weight

        lines = [
            ManifestLine(name, count, round(weights[name] * 1000))
            for name, count in counts.items()
        ]
        return Manifest(lines, total_weight)

    @staticmethod
    def ship(units, out=None):
        if out is None:
            out = sys.stdout
        manifest = ShippingService.build_manifest(units)
        for text in manifest.text_lines():
            print(text, file=out)
        return manifest


#Check-out service
class CheckoutService:

    def __init__(self, shipping_fee=SHIPPING_FEE):
        self.shipping_fee = shipping_fee

    def validate(self, cart, today=None):
        """Check every entry before anything is touched.

        Quantities are summed per item so that two entries for the same
        product cannot together take more than is on hand.
        """
        if cart.is_empty():
            raise EmptyCart()

        today = today or date.today()
        requested = {}
        for entry in cart.items:
            item = entry.item
            if item.is_expired(today):
                raise ExpiredProduct(item.name, item.expiry_date)
            requested[item.name] = requested.get(item.name, 0) + entry.qty
            if requested[item.name] > item.stock:
                raise InsufficientStock(item.name, requested[item.name], item.stock)

    def price(self, cart):
        subtotal = cart.subtotal()
        fee = self.shipping_fee if cart.shippable_units() else 0
        return subtotal, fee, subtotal + fee

    def checkout(self, account, cart, today=None, out=None):
        if out is None:
            out = sys.stdout

        self.validate(cart, today)

        subtotal, fee, total = self.price(cart)
        if not account.can_afford(total):
            raise InsufficientBalance(total, account.balance)

        units = cart.shippable_units()
        manifest = ShippingService.ship(units, out) if units else None

        settle(account, cart, total)

        record = CheckoutRecord(
            customer=account.name,
            lines=[(entry.qty, entry.item.name, entry.line_total) for entry in cart.items],
            subtotal=subtotal,
            shipping_fee=fee,
            total=total,
            balance=account.balance,
            manifest=manifest,
        )
        for text in ReceiptGenerator.lines(record):
            print(text, file=out)
        return record
