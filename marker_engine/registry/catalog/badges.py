"""Status badge types: precautions, isolation, code status and alerts.

Badges are shown in the ring around the body silhouette. Their default
position is the ring slot used when a renderer has no ring layout of its own.
"""

from marker_engine.registry.models import Position, StatusBadgeType

_RING_REGION = "status_ring"

PRECAUTIONS: tuple[StatusBadgeType, ...] = (
    StatusBadgeType(
        type="fall_risk",
        display_name="Fall Risk",
        category="moderate",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 4),
        keywords=(
            "fall risk",
            "high fall risk",
            "fall precautions",
            "risk for falls",
            "fall prevention",
        ),
        badge_color="#F59E0B",
        badge_icon="person-falling",
    ),
    StatusBadgeType(
        type="seizure_precautions",
        display_name="Seizure Precautions",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 10),
        keywords=("seizure precautions", "seizure pads", "padded side rails"),
        badge_color="#7C3AED",
        badge_icon="zap",
    ),
    StatusBadgeType(
        type="aspiration_precautions",
        display_name="Aspiration Precautions",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 16),
        keywords=(
            "aspiration precautions",
            "aspiration risk",
            "nothing by mouth",
            "npo status",
            "strict npo",
            "thickened liquids",
            "dysphagia",
        ),
        badge_color="#0EA5E9",
        badge_icon="utensils-crossed",
    ),
    StatusBadgeType(
        type="bleeding_precautions",
        display_name="Bleeding Precautions",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 22),
        keywords=(
            "bleeding precautions",
            "bleeding risk",
            "on anticoagulation",
            "anticoagulated",
            "thrombocytopenia",
        ),
        badge_color="#DC2626",
        badge_icon="droplet",
    ),
    StatusBadgeType(
        type="spinal_precautions",
        display_name="Spinal Precautions",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 28),
        keywords=("spinal precautions", "log roll", "logroll"),
        badge_color="#EA580C",
        badge_icon="align-vertical-justify-center",
    ),
    StatusBadgeType(
        type="suicide_precautions",
        display_name="Suicide Precautions",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 34),
        keywords=(
            "suicide precautions",
            "suicide risk",
            "suicidal ideation",
            "1:1 sitter",
            "one to one sitter",
        ),
        badge_color="#B91C1C",
        badge_icon="shield-alert",
    ),
    StatusBadgeType(
        type="elopement_risk",
        display_name="Elopement Risk",
        category="moderate",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 40),
        keywords=("elopement risk", "wandering risk", "wander guard", "wanderguard"),
        badge_color="#D97706",
        badge_icon="door-open",
    ),
    StatusBadgeType(
        type="sternal_precautions",
        display_name="Sternal Precautions",
        category="moderate",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 46),
        keywords=("sternal precautions",),
        badge_color="#F97316",
        badge_icon="heart-handshake",
    ),
    StatusBadgeType(
        type="hip_precautions",
        display_name="Hip Precautions",
        category="moderate",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(8, 52),
        keywords=("hip precautions", "posterior hip precautions"),
        badge_color="#F97316",
        badge_icon="bone",
    ),
)

ISOLATION: tuple[StatusBadgeType, ...] = (
    StatusBadgeType(
        type="contact_isolation",
        display_name="Contact Isolation",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 4),
        keywords=(
            "contact isolation",
            "contact precautions",
            "mrsa",
            "vre",
            "esbl",
        ),
        badge_color="#EAB308",
        badge_icon="hand",
    ),
    StatusBadgeType(
        type="contact_plus_isolation",
        display_name="Contact Plus (Enteric) Isolation",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 10),
        keywords=(
            "contact plus",
            "enteric precautions",
            "c diff",
            "c. diff",
            "clostridioides difficile",
            "norovirus",
        ),
        badge_color="#A16207",
        badge_icon="hand-helping",
    ),
    StatusBadgeType(
        type="droplet_isolation",
        display_name="Droplet Isolation",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 16),
        keywords=(
            "droplet isolation",
            "droplet precautions",
            "influenza",
            "flu positive",
            "pertussis",
        ),
        badge_color="#22C55E",
        badge_icon="droplets",
    ),
    StatusBadgeType(
        type="airborne_isolation",
        display_name="Airborne Isolation",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 22),
        keywords=(
            "airborne isolation",
            "airborne precautions",
            "tuberculosis",
            "tb rule out",
            "active tb",
            "measles",
            "varicella",
            "chickenpox",
        ),
        badge_color="#2563EB",
        badge_icon="wind",
    ),
    StatusBadgeType(
        type="neutropenic_precautions",
        display_name="Neutropenic Precautions",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 28),
        keywords=(
            "neutropenic precautions",
            "protective isolation",
            "reverse isolation",
            "neutropenic",
        ),
        badge_color="#DB2777",
        badge_icon="shield",
    ),
)

# Declaration order matters: combined DNR/DNI phrases must be seen before
# the bare "dnr" keyword during the substring pass.
CODE_STATUS: tuple[StatusBadgeType, ...] = (
    StatusBadgeType(
        type="full_code",
        display_name="Full Code",
        category="informational",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(50, 1),
        keywords=("full code", "full resuscitation"),
        badge_color="#16A34A",
        badge_icon="heart-pulse",
    ),
    StatusBadgeType(
        type="dnr_dni",
        display_name="DNR / DNI",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(50, 1),
        keywords=(
            "dnr/dni",
            "dnr dni",
            "dnr and dni",
            "do not resuscitate do not intubate",
        ),
        badge_color="#7F1D1D",
        badge_icon="heart-off",
    ),
    StatusBadgeType(
        type="dnr",
        display_name="DNR",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(50, 1),
        keywords=("do not resuscitate", "dnr", "no code", "no cpr"),
        badge_color="#991B1B",
        badge_icon="heart-off",
    ),
    StatusBadgeType(
        type="dni",
        display_name="DNI",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(50, 1),
        keywords=("do not intubate", "dni order", "dni status"),
        badge_color="#B45309",
        badge_icon="ban",
    ),
    StatusBadgeType(
        type="comfort_care",
        display_name="Comfort Care Only",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(50, 1),
        keywords=(
            "comfort care",
            "comfort measures only",
            "hospice",
        ),
        badge_color="#6D28D9",
        badge_icon="flower",
    ),
    StatusBadgeType(
        type="polst_on_file",
        display_name="POLST on File",
        category="informational",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(50, 1),
        keywords=("polst", "molst", "advance directive"),
        badge_color="#64748B",
        badge_icon="file-text",
    ),
)

ALERTS: tuple[StatusBadgeType, ...] = (
    StatusBadgeType(
        type="latex_allergy",
        display_name="Latex Allergy",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 34),
        keywords=("latex allergy", "latex sensitivity", "allergic to latex"),
        badge_color="#CA8A04",
        badge_icon="glove",
    ),
    StatusBadgeType(
        type="allergy_alert",
        display_name="Allergy Alert",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 40),
        keywords=(
            "allergy alert",
            "allergic to",
            "anaphylaxis",
            "allergies",
            "allergy",
        ),
        badge_color="#DC2626",
        badge_icon="alert-octagon",
    ),
    StatusBadgeType(
        type="difficult_airway",
        display_name="Difficult Airway",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 46),
        keywords=(
            "difficult airway",
            "difficult intubation",
            "difficult to intubate",
        ),
        badge_color="#BE123C",
        badge_icon="airplay",
    ),
    StatusBadgeType(
        type="blood_refusal",
        display_name="Refuses Blood Products",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 52),
        keywords=(
            "no blood products",
            "refuses blood",
            "blood transfusion refusal",
            "jehovah's witness",
        ),
        badge_color="#9F1239",
        badge_icon="droplet-off",
    ),
    StatusBadgeType(
        type="malignant_hyperthermia",
        display_name="Malignant Hyperthermia Risk",
        category="critical",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 58),
        keywords=("malignant hyperthermia",),
        badge_color="#C2410C",
        badge_icon="thermometer",
    ),
    StatusBadgeType(
        type="behavioral_alert",
        display_name="Behavioral Alert",
        category="moderate",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 64),
        keywords=(
            "behavioral alert",
            "violence risk",
            "aggressive behavior",
            "combative",
        ),
        badge_color="#EA580C",
        badge_icon="siren",
    ),
    StatusBadgeType(
        type="communication_alert",
        display_name="Communication Needs",
        category="informational",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 70),
        keywords=(
            "interpreter needed",
            "hard of hearing",
            "nonverbal",
            "non-verbal",
            "deaf",
        ),
        badge_color="#0284C7",
        badge_icon="message-circle",
    ),
    StatusBadgeType(
        type="name_alert",
        display_name="Name Alert",
        category="informational",
        default_body_region=_RING_REGION,
        default_body_view="front",
        default_position=Position(92, 76),
        keywords=("name alert", "similar name", "same name alert"),
        badge_color="#475569",
        badge_icon="users",
    ),
)
