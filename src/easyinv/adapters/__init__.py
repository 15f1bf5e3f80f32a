"""Adapters binding the core to storage and web frameworks."""
