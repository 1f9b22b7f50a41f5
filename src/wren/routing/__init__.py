"""Routing — template compilation and first-match route resolution.

Templates are compiled to anchored matchers when registered and
resolved in registration order.
"""
