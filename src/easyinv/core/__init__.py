"""Core domain: models, ports and pure record logic."""
