"""Configuration package for the heredity model.

Constants live in ``population``; runtime settings (which can be read from
the environment) live in ``settings``.
"""
