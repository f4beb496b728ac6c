"""Process-wide registry built from the bundled catalog.

Built once on first import; a catalog defect aborts the import.
"""

from marker_engine.registry.catalog import CATALOG_FAMILIES
from marker_engine.registry.registry import MarkerTypeRegistry

DEFAULT_REGISTRY = MarkerTypeRegistry(CATALOG_FAMILIES)
