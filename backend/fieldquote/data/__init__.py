"""Seed pricing data and lookup repositories."""

from fieldquote.data.repository import RateTableRepository

__all__ = ["RateTableRepository"]
