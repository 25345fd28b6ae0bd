"""Custom exception hierarchy for the fieldquote pricing engine."""

from __future__ import annotations


class FieldQuoteError(Exception):
    """Base exception for all fieldquote errors."""


class PricingConfigError(FieldQuoteError):
    """Raised when a pricing configuration is structurally malformed.

    Unpriced line items are a normal business state and resolve to 0;
    this error is reserved for a missing rate table or a configuration
    that does not cover a referenced system type or complexity tier.
    """
