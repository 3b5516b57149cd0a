"""Storefront backend - contact intake, payments and order notifications."""

__version__ = "1.0.0"
