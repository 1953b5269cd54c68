"""Domain layer.

Business logic for body metrics and contact messages, decoupled from the
HTTP routes and from the email infrastructure.
"""
