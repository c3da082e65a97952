"""Promo code factory: in-memory administrative API for customers, preferences and promo codes."""
