"""
Services package for the vehicle catalog.
"""

from vehicle_catalog.services.catalog import CatalogService

__all__ = ["CatalogService"]
