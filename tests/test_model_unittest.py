import os
import shutil
import tempfile
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PIL import Image

from model import ReceiptGenerator
from transactions import CheckoutRecord


def _record(lines=None):
    lines = [(2, 'Cheese', 200), (1, 'Biscuits', 150)] if lines is None else lines
    subtotal = sum(total for _, _, total in lines)
    return CheckoutRecord('Ali', lines, subtotal, 30, subtotal + 30, 1000 - subtotal - 30)


class ReceiptGeneratorTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_text_lines(self):
        self.assertEqual(ReceiptGenerator.lines(_record()), [
            '** Checkout receipt **',
            '2x Cheese',
            '200',
            '1x Biscuits',
            '150',
            '----------------------',
            'Subtotal      350',
            'Shipping      30',
            'Amount        380',
            'Balance       620',
        ])

    def test_generate_receipt_creates_png(self):
        png = ReceiptGenerator.generate(_record(), receipts_dir=self.tmpdir, order_number='unittest-1')
        self.assertEqual(png, os.path.join(self.tmpdir, 'unittest-1.png'))
        with Image.open(png) as img:
            self.assertEqual(img.format, 'PNG')

    def test_generate_receipt_no_lines_and_new_dir(self):
        target = os.path.join(self.tmpdir, 'nested')
        png = ReceiptGenerator.generate(_record(lines=[]), receipts_dir=target)
        self.assertTrue(os.path.exists(png))


if __name__ == '__main__':
    unittest.main()
