"""
Tests for order creation and lookup
"""
import unittest

from core.exceptions import InvalidOrder, NotFoundError, OrderNotFound
from database.repository import OrderRepository
from models.order import OrderItem, OrderRequest, OrderStatus
from services.order_service import OrderService


def make_request(user_id="user_1", name="João", items=None, **kwargs):
    if items is None:
        items = [OrderItem("1", 2, 8.5), OrderItem("2", 1, 7.5)]
    return OrderRequest(user_id=user_id, items=items, customer_name=name, **kwargs)


class TestOrderService(unittest.TestCase):
    """Test cases for OrderService"""

    def setUp(self):
        self.service = OrderService(OrderRepository())

    def test_total_amount(self):
        order = self.service.create_order(make_request())

        self.assertEqual(order.total_amount, 24.5)

    def test_sequential_order_numbers(self):
        first = self.service.create_order(make_request())
        second = self.service.create_order(make_request())

        self.assertEqual(first.order_number, "#0001")
        self.assertEqual(second.order_number, "#0002")

    def test_order_numbers_are_per_service(self):
        self.service.create_order(make_request())
        other = OrderService(OrderRepository())

        self.assertEqual(other.create_order(make_request()).order_number, "#0001")

    def test_configurable_number_width(self):
        service = OrderService(OrderRepository(), number_width=6)

        self.assertEqual(service.create_order(make_request()).order_number, "#000001")

    def test_created_order_fields(self):
        order = self.service.create_order(make_request(customer_phone="11999999999",
                                                       notes="Deliver to: Rua das Flores, 123"))

        self.assertTrue(order.order_id.startswith("order_"))
        self.assertEqual(order.user_id, "user_1")
        self.assertEqual(order.status, OrderStatus.PENDING)
        self.assertEqual(order.customer_name, "João")
        self.assertEqual(order.customer_phone, "11999999999")
        self.assertEqual(order.notes, "Deliver to: Rua das Flores, 123")
        self.assertEqual(order.created_at, order.updated_at)
        self.assertEqual(len(order.items), 2)

    def test_order_ids_are_unique(self):
        first = self.service.create_order(make_request())
        second = self.service.create_order(make_request())

        self.assertNotEqual(first.order_id, second.order_id)

    def test_invalid_request_is_rejected(self):
        with self.assertRaises(InvalidOrder) as ctx:
            self.service.create_order(make_request(name="", items=[]))

        self.assertEqual(ctx.exception.violations,
                         ["customer name required", "at least one item required"])
        self.assertEqual(self.service.get_all_orders(), [])

    def test_rejected_request_does_not_consume_number(self):
        with self.assertRaises(InvalidOrder):
            self.service.create_order(make_request(name=""))

        self.assertEqual(self.service.create_order(make_request()).order_number, "#0001")

    def test_get_order_by_id(self):
        created = self.service.create_order(make_request())

        found = self.service.get_order_by_id(created.order_id)
        self.assertEqual(found.to_dict(), created.to_dict())

    def test_get_unknown_order(self):
        with self.assertRaises(OrderNotFound):
            self.service.get_order_by_id("order_missing")

        with self.assertRaises(NotFoundError):
            self.service.get_order_by_id("order_missing")

    def test_get_user_orders_keeps_creation_order(self):
        first = self.service.create_order(make_request(user_id="a"))
        self.service.create_order(make_request(user_id="b"))
        third = self.service.create_order(make_request(user_id="a"))

        orders = self.service.get_user_orders("a")
        self.assertEqual([o.order_id for o in orders], [first.order_id, third.order_id])
        self.assertEqual(self.service.get_user_orders("nobody"), [])

    def test_clear_all_orders_resets_numbering(self):
        self.service.create_order(make_request())
        self.service.clear_all_orders()

        self.assertEqual(self.service.get_all_orders(), [])
        self.assertEqual(self.service.create_order(make_request()).order_number, "#0001")

    def test_to_dict(self):
        order = self.service.create_order(make_request())
        data = order.to_dict()

        self.assertEqual(data["status"], "pending")
        self.assertEqual(data["items"][0], {"product_id": "1", "quantity": 2, "price": 8.5})


if __name__ == '__main__':
    unittest.main()
