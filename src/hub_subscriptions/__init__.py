"""Subscription management API for the package hub."""

__version__ = "0.1.0"
