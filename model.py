from PIL import Image, ImageDraw, ImageFont
import os
from datetime import datetime

RECEIPT_HEADER = "** Checkout receipt **"
RECEIPT_SEPARATOR = "-" * 22
STORE_NAME = "Quick Checkout"

# Receipts are stored next to this module unless the caller picks a directory
RECEIPTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'receipts')


class ReceiptGenerator:
    @staticmethod
    def lines(record):
        """Text receipt for a finished checkout, one entry per printed line."""
        out = [RECEIPT_HEADER]
        for qty, name, line_total in record.lines:
            out.append(f"{qty}x {name}")
            out.append(f"{line_total}")
        out.append(RECEIPT_SEPARATOR)
        out.append(f"Subtotal      {record.subtotal}")
        out.append(f"Shipping      {record.shipping_fee}")
        out.append(f"Amount        {record.total}")
        out.append(f"Balance       {record.balance}")
        return out

    @staticmethod
    def _load_font(size):
        # Try common system fonts, fallback to default
        candidates = ["arial.ttf", "DejaVuSans.ttf", "LiberationSans-Regular.ttf"]
        for f in candidates:
            try:
                return ImageFont.truetype(f, size)
            except OSError:
                continue
        return ImageFont.load_default()

    @staticmethod
    def _text_width(draw, text, font):
        bbox = draw.textbbox((0, 0), text, font=font)
        return bbox[2] - bbox[0]

    @staticmethod
    def generate(record, receipts_dir=RECEIPTS_DIR, order_number=None):
        """Render the receipt of a finished checkout to a PNG and return its path."""
        os.makedirs(receipts_dir, exist_ok=True)

        now = datetime.now()
        order_number = order_number or now.strftime('%Y%m%d%H%M%S%f')
        png_path = os.path.join(receipts_dir, f"{order_number}.png")

        width = 520
        header_h = 130
        line_h = 24
        footer_h = 150
        items_h = max(60, len(record.lines) * line_h + 20)
        height = header_h + items_h + footer_h

        img = Image.new('RGB', (width, height), color=(255, 255, 255))
        draw = ImageDraw.Draw(img)

        f_head = ReceiptGenerator._load_font(24)
        f_sub = ReceiptGenerator._load_font(14)
        f_mono = ReceiptGenerator._load_font(12)

        x = 30
        y = 24
        value_x = width - x

        # Header
        draw.text((x, y), STORE_NAME, font=f_head, fill=(20, 20, 20))
        y += 34
        draw.text((x, y), f"Order #: {order_number}", font=f_sub, fill=(0, 0, 0))
        y += 20
        draw.text((x, y), f"Date: {now.strftime('%Y-%m-%d %H:%M:%S')}", font=f_sub, fill=(0, 0, 0))
        y += 20
        if record.customer:
            draw.text((x, y), f"Customer: {record.customer}", font=f_sub, fill=(0, 0, 0))
        y = header_h - 10
        draw.line((x, y, width - x, y), fill=(200, 200, 200), width=1)
        y += 10

        # Items, amounts right-aligned
        for qty, name, line_total in record.lines:
            draw.text((x, y), f"{qty}x {name}", font=f_mono, fill=(20, 20, 20))
            amount = str(line_total)
            draw.text((value_x - ReceiptGenerator._text_width(draw, amount, f_mono), y),
                      amount, font=f_mono, fill=(20, 20, 20))
            y += line_h

        y = header_h + items_h
        draw.line((x, y, width - x, y), fill=(200, 200, 200), width=1)
        y += 12

        totals = [
            ("Subtotal", record.subtotal),
            ("Shipping", record.shipping_fee),
            ("Amount", record.total),
            ("Balance", record.balance),
        ]
        for label, value in totals:
            draw.text((x, y), label, font=f_sub, fill=(0, 0, 0))
            txt = str(value)
            fill = (0, 100, 0) if label == "Amount" else (0, 0, 0)
            draw.text((value_x - ReceiptGenerator._text_width(draw, txt, f_sub), y),
                      txt, font=f_sub, fill=fill)
            y += line_h

        draw.text((x, y + 6), "Thank you for shopping!", font=f_sub, fill=(80, 80, 80))

        img.save(png_path)
        return png_path
