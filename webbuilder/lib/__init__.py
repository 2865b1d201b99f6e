"""Shared helpers: logging, JSON decoding, dates and file access."""
