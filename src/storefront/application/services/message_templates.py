"""Email and SMS templates for storefront notifications."""

from dataclasses import dataclass
from html import escape

from storefront.domain.entities import ContactMessage, Order
from storefront.domain.value_objects import format_cedi


@dataclass(frozen=True)
class EmailContent:
    """Rendered email: subject, plain text body and HTML alternative."""

    subject: str
    text: str
    html: str


def _one_line(text: str) -> str:
    return " ".join(text.split())


def _greeting_name(order: Order) -> str:
    return escape(order.customer.name or "customer")


def _thanks(order: Order) -> str:
    return f"Thanks {order.customer.name}!" if order.customer.name else "Thanks!"


def _items_html(order: Order) -> str:
    lines = "".join(
        f"<li>{item.qty} x {escape(item.title)} — {escape(item.display_price)}</li>"
        for item in order.items
    )
    return f"<ul>{lines}</ul>"


def _multiline_html(text: str) -> str:
    return "<br/>".join(escape(line) or "&nbsp;" for line in text.split("\n"))


def contact_message_email(message: ContactMessage) -> EmailContent:
    """Notification to the shop owner about a contact form submission."""
    text = f"{message.name} ({message.email})\n"
    if message.phone:
        text += f"Phone: {message.phone}\n"
    text += (
        f"Topic: {message.topic}\n"
        f"Message: {message.message}\n"
        f"Received: {message.created_at}"
    )

    html = f"""
    <p>You have a new contact form submission.</p>
    <p><strong>Name:</strong> {escape(message.name)}</p>
    <p><strong>Email:</strong> {escape(message.email)}</p>
    <p><strong>Phone:</strong> {escape(message.phone or "—")}</p>
    <p><strong>Topic:</strong> {escape(message.topic)}</p>
    <p><strong>Message:</strong></p>
    <div style="padding:12px;border-left:4px solid #e50f65;background:#fff7fb;">{_multiline_html(message.message)}</div>
    <p style="font-size:12px;color:#666;margin-top:12px;">Received: {escape(message.created_at)}</p>
    """
    return EmailContent(
        subject=_one_line(f"New contact message from {message.name}"),
        text=text,
        html=html,
    )


def contact_message_sms(message: ContactMessage) -> str:
    phone = f", {message.phone}" if message.phone else ""
    return f"Contact: {message.name} ({message.topic}) {message.email}{phone}"


def order_confirmation_email(order: Order, store_name: str) -> EmailContent:
    """Receipt sent when the checkout submits an order."""
    reference = ""
    if order.payment_ref:
        reference = f"<p>Payment reference: <strong>{escape(order.payment_ref)}</strong></p>"

    html = f"""
    <p>Hi {_greeting_name(order)},</p>
    <p>Thanks for your order. Your order number is <strong>{escape(order.order_id)}</strong>.</p>
    {reference}
    <p><strong>Shipping address</strong>: {escape(order.customer.shipping_address)}</p>
    <p><strong>Items</strong></p>{_items_html(order)}
    <p>Subtotal: {format_cedi(order.subtotal)} — Total: {format_cedi(order.total)}</p>
    <p>Regards,<br/>{escape(store_name)}</p>
    """
    items = ", ".join(str(item) for item in order.items)
    return EmailContent(
        subject=_one_line(f"Order confirmation — {order.order_id}"),
        text=f"Order {order.order_id} confirmed. Items: {items}",
        html=html,
    )


def order_confirmation_sms(order: Order) -> str:
    reference = f" (Ref: {order.payment_ref})" if order.payment_ref else ""
    return f"{_thanks(order)} Order {order.order_id} received. Total: {format_cedi(order.total)}{reference}"


def payment_received_email(order: Order, store_name: str) -> EmailContent:
    """Receipt sent once the gateway confirmed the payment."""
    subtotal = f"Subtotal: {format_cedi(order.subtotal)} — " if order.subtotal else ""
    html = f"""
    <p>Hi {_greeting_name(order)},</p>
    <p>Your payment was successful. Reference: <strong>{escape(order.payment_ref)}</strong></p>
    <p>Order number: <strong>{escape(order.order_id)}</strong></p>
    <p><strong>Items</strong></p>{_items_html(order)}
    <p>{subtotal}Total: {format_cedi(order.total)}</p>
    <p>Regards,<br/>{escape(store_name)}</p>
    """
    return EmailContent(
        subject=_one_line(f"Payment received — {order.order_id}"),
        text=f"Order {order.order_id} confirmed. Ref: {order.payment_ref}",
        html=html,
    )


def payment_received_sms(order: Order) -> str:
    return (
        f"{_thanks(order)} Payment received for Order {order.order_id}. "
        f"Total: {format_cedi(order.total)} (Ref: {order.payment_ref})"
    )
