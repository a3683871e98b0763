"""Maccas Client.

Typed async client for the fast-food loyalty app's mobile backend: token
exchange, customer login, offers, deal stack, restaurant lookup and
loyalty points.
"""

__version__ = "0.1.0"
