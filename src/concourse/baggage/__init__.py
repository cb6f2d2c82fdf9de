"""Baggage module: records checked baggage and computes fees.

Provider module. It knows nothing about seat selection or any other module
that ends up recording baggage through it.
"""

from .service import DEFAULT_FEE_PER_KG, BaggageRecord, BaggageService

__all__ = ["DEFAULT_FEE_PER_KG", "BaggageRecord", "BaggageService"]
