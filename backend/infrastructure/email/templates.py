"""Plain text and HTML bodies for outgoing emails."""

from html import escape

from domain.contact.core.value_objects import ContactMessage, NewsletterSignup


def render_contact(message: ContactMessage) -> tuple[str, str]:
    """Render a contact message as (text, html)."""
    lines = [
        f"Imię: {message.name}",
        f"Email: {message.email}",
    ]
    if message.phone:
        lines.append(f"Telefon: {message.phone}")
    lines.extend(["", message.message])
    text = "\n".join(lines)

    html_parts = [
        f"<p><strong>Imię:</strong> {escape(message.name)}</p>",
        f"<p><strong>Email:</strong> {escape(message.email)}</p>",
    ]
    if message.phone:
        html_parts.append(f"<p><strong>Telefon:</strong> {escape(message.phone)}</p>")
    body = escape(message.message).replace("\n", "<br>")
    html_parts.append(f"<p>{body}</p>")
    return text, "\n".join(html_parts)


def render_newsletter_signup(signup: NewsletterSignup) -> tuple[str, str]:
    """Render a newsletter signup notification as (text, html)."""
    who = f"{signup.name} <{signup.email}>" if signup.name else signup.email
    text = f"Nowy zapis do newslettera: {who}"
    html = f"<p>Nowy zapis do newslettera: <strong>{escape(who)}</strong></p>"
    return text, html
