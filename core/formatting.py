"""
Customer-facing text helpers
"""
from typing import Mapping
from urllib.parse import quote

from models.order import Order


def format_currency(value: float) -> str:
    # Brazilian real: R$ 1.234,50
    text = f"{value:,.2f}"
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {text}"


def order_message(order: Order, titles: Mapping[str, str]) -> str:
    # Summary sent to the shop once the order exists; titles maps product id to name
    lines = [
        f"NOVO PEDIDO {order.order_number}",
        "",
        f"Cliente: {order.customer_name}",
        f"Telefone: {order.customer_phone or 'Não informado'}",
    ]
    if order.notes:
        lines.append(order.notes)

    lines.append("")
    lines.append("Itens:")
    for item in order.items:
        title = titles.get(item.product_id, f"Produto {item.product_id}")
        lines.append(f" {item.quantity}x {title} - {format_currency(item.price)}")

    lines.append("")
    lines.append(f"Valor total: {format_currency(order.total_amount)}")
    return "\n".join(lines)


def whatsapp_link(phone_number: str, message: str) -> str:
    return f"http://api.whatsapp.com/send?phone={phone_number}&text={quote(message)}"
