"""Unit tests for email body rendering."""

from domain.contact.core.value_objects import ContactMessage, NewsletterSignup
from infrastructure.email.templates import render_contact, render_newsletter_signup


def test_render_contact_escapes_html():
    msg = ContactMessage(name="<script>", email="a@b.pl", message="x < y\nkoniec")

    text, html = render_contact(msg)

    assert "<script>" in text
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "x &lt; y<br>koniec" in html


def test_render_contact_phone_optional():
    without = ContactMessage(name="Anna", email="a@b.pl", message="Hi")
    with_phone = ContactMessage(name="Anna", email="a@b.pl", message="Hi", phone="123")

    assert "Telefon" not in render_contact(without)[0]
    assert "Telefon: 123" in render_contact(with_phone)[0]


def test_render_newsletter_signup():
    text, html = render_newsletter_signup(NewsletterSignup(email="jan@example.com"))

    assert text == "Nowy zapis do newslettera: jan@example.com"
    assert "jan@example.com" in html
