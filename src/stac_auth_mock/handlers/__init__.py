"""Handlers to process requests."""

from .stac import StacHandler

__all__ = ["StacHandler"]
