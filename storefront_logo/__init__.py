"""Storefront logo configuration API."""

__version__ = "0.1.0"
