"""Shared helpers: logging, observers and handler pipelines."""
