"""Structured ad data extraction from rendered Ad Library pages."""

__version__ = "0.1.0"
