"""Adapters: concrete implementations of the core ports."""
