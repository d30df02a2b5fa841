"""Functional helpers for sequences, mappings, conditions, errors, channels and concurrency."""

__version__ = "0.1.0"