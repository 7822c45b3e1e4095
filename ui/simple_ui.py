"""
Simple text-based storefront
"""
from core.exceptions import CafezinhoError, InvalidOrder, ProductNotFound
from core.formatting import format_currency
from core.storefront import CafezinhoStore


class SimpleStoreUI:
    """Terminal loop over the cart and checkout"""

    def __init__(self, store: CafezinhoStore, input_func=input, output_func=print):
        self.store = store
        self.input = input_func
        self.output = output_func

    def run(self):
        """Read commands until quit"""
        self.output("Cafezinho")
        self.output("Commands: menu, add <id|name>, remove <id>, cart, order, clear, quit")

        while True:
            try:
                user_input = self.input("\n> ").strip()
            except EOFError:
                break

            command, _, argument = user_input.partition(" ")
            command = command.lower()
            argument = argument.strip()

            if command in ("quit", "exit"):
                self.output("Thanks, see you soon!")
                break
            elif command == "menu":
                self._show_menu()
            elif command == "add":
                self._add(argument)
            elif command == "remove":
                self._remove(argument)
            elif command == "cart":
                self._show_cart()
            elif command == "clear":
                self.store.cart_service.clear()
                self.output("Cart cleared.")
            elif command == "order":
                self._process_order()
            elif command:
                self.output(f"Unknown command: {command}")

    def _show_menu(self):
        for section in self.store.product_service.organize_by_category():
            self.output(f"\n[{section['title']}]")
            for product in section["data"]:
                price = format_currency(product.price or 0.0)
                self.output(f"{product.product_id}. {product.title} ({price})")

    def _add(self, argument: str):
        if not argument:
            self.output("Tell me which product to add.")
            return

        try:
            product = self.store.product_service.get_product(argument)
        except ProductNotFound:
            # Fall back to a title lookup
            matches = self.store.product_service.find_product(argument, limit=1)
            if not matches:
                self.output(f"No product matches '{argument}'.")
                return
            product = matches[0]

        self.store.cart_service.add(product)
        self.output(f"Added {product.title}. Items in cart: {self.store.cart_service.get_total_items()}")

    def _remove(self, argument: str):
        self.store.cart_service.remove(argument)
        self._show_cart()

    def _show_cart(self):
        cart = self.store.cart_service
        if cart.is_empty():
            self.output("Your cart is empty.")
            return

        for entry in cart.entries:
            self.output(f"- {entry.quantity}x {entry.title}: {format_currency(entry.line_total)}")
        self.output(f"Total: {format_currency(cart.get_total_price())}")

    def _process_order(self):
        user = self.store.user_service.get_current_user()
        default_name = user.name if user and user.name else ""

        prompt = f"Name [{default_name}]: " if default_name else "Name: "
        name = self.input(prompt).strip() or default_name
        phone = self.input("Phone (optional): ").strip()
        address = self.input("Delivery address: ").strip()

        if not address:
            self.output("Delivery address is required.")
            return

        try:
            order = self.store.checkout(name, customer_phone=phone, address=address)
        except InvalidOrder as e:
            self.output("Could not place the order:")
            for violation in e.violations:
                self.output(f"  - {violation}")
            return
        except CafezinhoError as e:
            self.output(f"Could not place the order: {e}")
            return

        self.output(f"Order {order.order_number} created! Total: {format_currency(order.total_amount)}")
        self.output(f"Share it: {self.store.whatsapp_link(order)}")
