"""Utility helpers shared across the model."""
