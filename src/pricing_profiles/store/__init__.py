"""Store subpackage - in-memory repositories for products and pricing profiles."""
from .catalog import CatalogRepository
from .data_store import DataStore
from .entity_store import EntityStore
from .profiles import ProfileRepository

__all__ = ['CatalogRepository', 'DataStore', 'EntityStore', 'ProfileRepository']
