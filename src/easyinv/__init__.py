"""EasyInv API: in-memory ingestion and query service for inventory scans."""

from easyinv.app import create_app
from easyinv.config import Settings, load_settings

__all__ = ["Settings", "create_app", "load_settings"]
