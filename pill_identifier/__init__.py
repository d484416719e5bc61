"""Identify medicines from photos and explain them in plain, localized language."""

__version__ = "0.1.0"
