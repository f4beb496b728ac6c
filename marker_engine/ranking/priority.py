"""Priority weights used by the ranker.

Kept as plain tables so clinical reviewers can audit them without reading
the ranking code.
"""

from types import MappingProxyType

CATEGORY_WEIGHTS: MappingProxyType[str, int] = MappingProxyType(
    {
        "critical": 100,
        "neurological": 80,
        "monitoring": 60,
        "chronic": 50,
        "moderate": 40,
        "informational": 20,
    }
)
DEFAULT_CATEGORY_WEIGHT = 30

# Per-type floors. A floor only raises the category weight, never lowers it.
PRIORITY_OVERRIDES: MappingProxyType[str, int] = MappingProxyType(
    {
        # Code status
        "full_code": 150,
        "dnr_dni": 150,
        "dnr": 150,
        "dni": 150,
        "comfort_care": 150,
        # Precautions
        "suicide_precautions": 120,
        "seizure_precautions": 110,
        "aspiration_precautions": 110,
        "bleeding_precautions": 105,
        "spinal_precautions": 105,
        "fall_risk": 100,
        "elopement_risk": 100,
        # Isolation
        "airborne_isolation": 130,
        "neutropenic_precautions": 125,
        "droplet_isolation": 120,
        "contact_plus_isolation": 120,
        "contact_isolation": 115,
        # Alerts
        "allergy_alert": 125,
        "difficult_airway": 125,
        "latex_allergy": 120,
        "blood_refusal": 120,
        "malignant_hyperthermia": 120,
        # Devices
        "central_line": 110,
        "tracheostomy": 110,
        "endotracheal_tube": 110,
        "lvad": 110,
        "chest_tube": 105,
        "arterial_line": 105,
        "dialysis_catheter": 105,
        "icp_monitor": 105,
        # Vein access
        "limb_restriction": 100,
        "difficult_iv_access": 90,
        "ultrasound_guided_access": 70,
        "vein_preservation": 60,
        "preferred_vein_site": 30,
    }
)

ATTENTION_BONUS = 50
PENDING_CONFIRMATION_BONUS = 25
RECENT_12H_BONUS = 25
RECENT_24H_BONUS = 15
COMPLICATIONS_WATCH_BONUS = 20
