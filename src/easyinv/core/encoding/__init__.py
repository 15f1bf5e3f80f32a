"""Encoders for exported inventory data."""
