"""Utility helpers shared across the heredity package."""
