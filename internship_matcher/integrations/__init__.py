"""
Internship catalog sources: local JSON exports and HTTP catalog APIs.
"""

from .base import CatalogProvider
from .file_catalog import FileCatalogProvider
from .http_catalog import HttpCatalogProvider
from .lookup import fetch_internships, bulk_match_ids

__all__ = [
    "CatalogProvider",
    "FileCatalogProvider",
    "HttpCatalogProvider",
    "fetch_internships",
    "bulk_match_ids",
]
