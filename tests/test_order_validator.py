"""
Tests for order validation and cart-to-order conversion
"""
import unittest

from models.cart import CartEntry
from models.order import OrderItem, OrderRequest
from services.order_converter import to_order_items
from services.order_validator import validate_order


class TestOrderValidator(unittest.TestCase):
    """Test cases for validate_order"""

    def test_valid_order_has_no_violations(self):
        request = OrderRequest(user_id="u1", customer_name="Ana",
                               items=[OrderItem("1", 1, 5)])

        self.assertEqual(validate_order(request), [])

    def test_empty_name_and_items(self):
        request = OrderRequest(user_id="u1", customer_name="", items=[])

        self.assertEqual(validate_order(request),
                         ["customer name required", "at least one item required"])

    def test_blank_name(self):
        request = OrderRequest(user_id="u1", customer_name="   ",
                               items=[OrderItem("1", 1, 5)])

        self.assertEqual(validate_order(request), ["customer name required"])

    def test_missing_name(self):
        request = OrderRequest(user_id="u1", items=[OrderItem("1", 1, 5)])

        self.assertEqual(validate_order(request), ["customer name required"])

    def test_each_invalid_item_reported_with_position(self):
        request = OrderRequest(user_id="u1", customer_name="Ana", items=[
            OrderItem("1", 1, 5),
            OrderItem(None, 1, 5),
            OrderItem("3", 0, 5),
            OrderItem("4", -2, 5),
        ])

        self.assertEqual(validate_order(request),
                         ["item 2 invalid data", "item 3 invalid data", "item 4 invalid data"])

    def test_non_numeric_quantity_is_invalid(self):
        request = OrderRequest(user_id="u1", customer_name="Ana",
                               items=[OrderItem("1", "two", 5)])

        self.assertEqual(validate_order(request), ["item 1 invalid data"])

    def test_negative_price_is_invalid(self):
        request = OrderRequest(user_id="u1", customer_name="Ana",
                               items=[OrderItem("1", 1, -1)])

        self.assertEqual(validate_order(request), ["item 1 invalid data"])

    def test_fractional_and_non_finite_quantity_is_invalid(self):
        for quantity in (1.5, float("inf"), float("nan"), True):
            with self.subTest(quantity=quantity):
                request = OrderRequest(user_id="u1", customer_name="Ana",
                                       items=[OrderItem("1", quantity, 5)])

                self.assertEqual(validate_order(request), ["item 1 invalid data"])

    def test_non_finite_price_is_invalid(self):
        for price in (float("inf"), float("-inf"), float("nan")):
            with self.subTest(price=price):
                request = OrderRequest(user_id="u1", customer_name="Ana",
                                       items=[OrderItem("1", 1, price)])

                self.assertEqual(validate_order(request), ["item 1 invalid data"])

    def test_from_dict_accepts_mobile_client_keys(self):
        request = OrderRequest.from_dict({
            "userId": "user_123", "customerName": "Ana", "customerPhone": "11999999999",
            "notes": "Sem açúcar", "items": [{"product": "1", "quantity": 1, "price": 5}],
        })

        self.assertEqual(request.user_id, "user_123")
        self.assertEqual(request.customer_name, "Ana")
        self.assertEqual(request.customer_phone, "11999999999")
        self.assertEqual(request.items, [OrderItem("1", 1, 5)])
        self.assertEqual(validate_order(request), [])

    def test_from_dict_non_list_items(self):
        request = OrderRequest.from_dict({"customer_name": "Ana", "items": 5})

        self.assertEqual(validate_order(request), ["at least one item required"])

    def test_zero_price_is_accepted(self):
        request = OrderRequest(user_id="u1", customer_name="Ana",
                               items=[OrderItem("1", 1, 0)])

        self.assertEqual(validate_order(request), [])

    def test_from_dict_keeps_bad_values_for_reporting(self):
        request = OrderRequest.from_dict({
            "user_id": "u1",
            "customer_name": 42,
            "items": [{"product_id": "1", "quantity": 2}, "junk"],
        })

        self.assertEqual(request.items[0].price, 0.0)
        self.assertEqual(validate_order(request),
                         ["customer name required", "item 2 invalid data"])


class TestOrderConverter(unittest.TestCase):
    """Test cases for to_order_items"""

    def test_converts_in_cart_order(self):
        entries = [
            CartEntry("2", "Expresso Latte", "Drinks", 7.5, 1),
            CartEntry("1", "Expresso Cappuccino", "Drinks", 8.5, 2),
        ]

        items = to_order_items(entries)

        self.assertEqual([(i.product_id, i.quantity, i.price) for i in items],
                         [("2", 1, 7.5), ("1", 2, 8.5)])

    def test_missing_price_becomes_zero(self):
        items = to_order_items([CartEntry("1", "Expresso", "Drinks", None, 1)])

        self.assertEqual(items[0].price, 0.0)

    def test_empty_cart(self):
        self.assertEqual(to_order_items([]), [])


if __name__ == '__main__':
    unittest.main()
