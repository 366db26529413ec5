#checkout record
class CheckoutRecord:
    def __init__(self, customer, lines, subtotal, shipping_fee, total, balance, manifest=None):
        self.customer = customer
        self.lines = lines  # [(qty, name, line_total)] in cart order
        self.subtotal = subtotal
        self.shipping_fee = shipping_fee
        self.total = total
        self.balance = balance
        self.manifest = manifest


def settle(account, cart, total):
    """Deduct the total and take every entry's quantity out of stock.

    Only called once all validation has passed, so it never raises for
    stock or balance reasons.
    """
    account.deduct(total)
    for entry in cart.items:
        entry.item.reduce_stock(entry.qty)
