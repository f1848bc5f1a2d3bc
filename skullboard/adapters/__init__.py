"""Adapters: framework-specific implementations of the ports."""
