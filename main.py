import argparse
import sys

from errors import CheckoutError
from model import RECEIPTS_DIR, ReceiptGenerator
from models import Account
from products import demo_catalog
from services import CartService, CheckoutService


def run(balance=1000, receipt_png=False, receipts_dir=RECEIPTS_DIR, out=None):
    if out is None:
        out = sys.stdout

    catalog = demo_catalog()
    customer = Account("Ali", balance)
    session = CartService()

    try:
        session.add_to_cart(catalog.get("Cheese"), 2)
        session.add_to_cart(catalog.get("Biscuits"), 1)
        session.add_to_cart(catalog.get("Scratch Card"), 1)
        record = CheckoutService().checkout(customer, session.cart, out=out)
    except CheckoutError as e:
        print(f"Checkout failed: {e}", file=out)
        return 1

    if receipt_png:
        png = ReceiptGenerator.generate(record, receipts_dir=receipts_dir)
        print(f"Receipt saved to {png}", file=out)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run the demo checkout')
    parser.add_argument('--balance', type=int, default=1000, help='Starting balance for the customer')
    parser.add_argument('--receipt-png', action='store_true', help='Also render the receipt as a PNG')
    parser.add_argument('--receipts-dir', default=RECEIPTS_DIR, help='Where PNG receipts are written')
    args = parser.parse_args(argv)

    return run(args.balance, args.receipt_png, args.receipts_dir)


if __name__ == "__main__":
    sys.exit(main())
