"""Regulatory data sources."""

from .fda_client import FdaLabelClient

__all__ = ["FdaLabelClient"]
