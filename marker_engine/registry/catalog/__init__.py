"""Built-in marker type catalog, as an ordered list of families.

The family order and the declaration order inside each family decide which
type wins when keywords overlap, so both are part of the matching contract.
"""

from marker_engine.registry.catalog.badges import (
    ALERTS,
    CODE_STATUS,
    ISOLATION,
    PRECAUTIONS,
)
from marker_engine.registry.catalog.conditions import (
    CHRONIC_CONDITIONS,
    NEUROLOGICAL_CONDITIONS,
)
from marker_engine.registry.catalog.devices import (
    DRAINAGE_TUBES,
    IMPLANTS,
    MONITORING_DEVICES,
    ORTHOPEDIC,
    VASCULAR_ACCESS,
    VEIN_ACCESS,
    WOUNDS_SURGICAL,
)
from marker_engine.registry.models import MarkerTypeDefinition

CatalogFamily = tuple[str, tuple[MarkerTypeDefinition, ...]]

CATALOG_FAMILIES: tuple[CatalogFamily, ...] = (
    ("vascular_access", VASCULAR_ACCESS),
    ("vein_access", VEIN_ACCESS),
    ("drainage_tubes", DRAINAGE_TUBES),
    ("wounds_surgical", WOUNDS_SURGICAL),
    ("orthopedic", ORTHOPEDIC),
    ("monitoring_devices", MONITORING_DEVICES),
    ("implants", IMPLANTS),
    ("chronic_conditions", CHRONIC_CONDITIONS),
    ("neurological_conditions", NEUROLOGICAL_CONDITIONS),
    ("precautions", PRECAUTIONS),
    ("isolation", ISOLATION),
    ("code_status", CODE_STATUS),
    ("alerts", ALERTS),
)

__all__ = ["CATALOG_FAMILIES", "CatalogFamily"]
