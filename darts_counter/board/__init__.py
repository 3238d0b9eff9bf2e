"""
Board module - dart value domain, segment reconstruction, checkout table.
"""
from .segments import (
    LEGAL_DART_VALUES,
    candidate_hits,
    classify_dart_value,
    is_legal_dart_value,
)
from .checkout import (
    CHECKOUT_TABLE,
    MAX_CHECKOUT,
    get_checkout_suggestion,
    is_checkout_range,
)

__all__ = [
    "LEGAL_DART_VALUES",
    "candidate_hits",
    "classify_dart_value",
    "is_legal_dart_value",
    "CHECKOUT_TABLE",
    "MAX_CHECKOUT",
    "get_checkout_suggestion",
    "is_checkout_range",
]
