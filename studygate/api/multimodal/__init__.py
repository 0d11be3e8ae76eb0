"""Multimodal input helpers for API adapters."""
