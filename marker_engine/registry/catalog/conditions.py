"""Chronic and neurological condition marker types."""

from marker_engine.registry.models import (
    AnatomicalMarkerType,
    Lateralizable,
    Position,
)

CHRONIC_CONDITIONS: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="diabetes",
        display_name="Diabetes",
        category="chronic",
        default_body_region="pancreas",
        default_body_view="front",
        default_position=Position(54, 44),
        keywords=(
            "diabetes",
            "diabetic",
            "type 1 diabetes",
            "type 2 diabetes",
            "t2dm",
            "iddm",
            "niddm",
        ),
        icd10="E11.9",
    ),
    AnatomicalMarkerType(
        type="heart_failure",
        display_name="Heart Failure",
        category="chronic",
        default_body_region="heart",
        default_body_view="front",
        default_position=Position(54, 28),
        keywords=(
            "congestive heart failure",
            "heart failure",
            "chf",
            "hfref",
            "hfpef",
        ),
        icd10="I50.9",
    ),
    AnatomicalMarkerType(
        type="copd",
        display_name="COPD",
        category="chronic",
        default_body_region="lungs",
        default_body_view="front",
        default_position=Position(50, 30),
        keywords=(
            "copd",
            "chronic obstructive pulmonary disease",
            "emphysema",
            "chronic bronchitis",
        ),
        icd10="J44.9",
    ),
    AnatomicalMarkerType(
        type="chronic_kidney_disease",
        display_name="Chronic Kidney Disease",
        category="chronic",
        default_body_region="kidneys",
        default_body_view="back",
        default_position=Position(50, 45),
        keywords=(
            "chronic kidney disease",
            "ckd",
            "end stage renal disease",
            "esrd",
            "renal failure",
        ),
        icd10="N18.9",
    ),
    AnatomicalMarkerType(
        type="hypertension",
        display_name="Hypertension",
        category="chronic",
        default_body_region="heart",
        default_body_view="front",
        default_position=Position(52, 30),
        keywords=("hypertension", "htn", "high blood pressure"),
        icd10="I10",
    ),
    AnatomicalMarkerType(
        type="asthma",
        display_name="Asthma",
        category="chronic",
        default_body_region="lungs",
        default_body_view="front",
        default_position=Position(50, 30),
        keywords=("asthma", "reactive airway disease"),
        icd10="J45.909",
    ),
    AnatomicalMarkerType(
        type="atrial_fibrillation",
        display_name="Atrial Fibrillation",
        category="chronic",
        default_body_region="heart",
        default_body_view="front",
        default_position=Position(54, 28),
        keywords=("atrial fibrillation", "afib", "a-fib", "a fib"),
        icd10="I48.91",
    ),
    AnatomicalMarkerType(
        type="coronary_artery_disease",
        display_name="Coronary Artery Disease",
        category="chronic",
        default_body_region="heart",
        default_body_view="front",
        default_position=Position(54, 28),
        keywords=("coronary artery disease", "ischemic heart disease"),
        icd10="I25.10",
    ),
    AnatomicalMarkerType(
        type="cancer",
        display_name="Cancer",
        category="chronic",
        default_body_region="torso",
        default_body_view="front",
        default_position=Position(50, 40),
        keywords=("cancer", "malignancy", "metastatic", "oncology patient"),
        icd10="C80.1",
    ),
    AnatomicalMarkerType(
        type="cirrhosis",
        display_name="Cirrhosis",
        category="chronic",
        default_body_region="liver",
        default_body_view="front",
        default_position=Position(42, 42),
        keywords=("cirrhosis", "end stage liver disease", "esld"),
        icd10="K74.60",
    ),
    AnatomicalMarkerType(
        type="rheumatoid_arthritis",
        display_name="Rheumatoid Arthritis",
        category="chronic",
        default_body_region="hands",
        default_body_view="front",
        default_position=Position(14, 52),
        keywords=("rheumatoid arthritis",),
        icd10="M06.9",
    ),
    AnatomicalMarkerType(
        type="sickle_cell_disease",
        display_name="Sickle Cell Disease",
        category="chronic",
        default_body_region="torso",
        default_body_view="front",
        default_position=Position(50, 38),
        keywords=("sickle cell disease", "sickle cell"),
        icd10="D57.1",
    ),
    AnatomicalMarkerType(
        type="hiv",
        display_name="HIV",
        category="chronic",
        default_body_region="torso",
        default_body_view="front",
        default_position=Position(50, 38),
        keywords=(
            "hiv positive",
            "hiv infection",
            "hiv/aids",
            "human immunodeficiency virus",
        ),
        icd10="B20",
    ),
    AnatomicalMarkerType(
        type="inflammatory_bowel_disease",
        display_name="Inflammatory Bowel Disease",
        category="chronic",
        default_body_region="abdomen",
        default_body_view="front",
        default_position=Position(50, 48),
        keywords=(
            "inflammatory bowel disease",
            "crohn's disease",
            "crohn's",
            "crohns",
            "ulcerative colitis",
        ),
        icd10="K50.90",
    ),
)

NEUROLOGICAL_CONDITIONS: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="seizure_disorder",
        display_name="Seizure Disorder",
        category="neurological",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(50, 5),
        keywords=("seizure disorder", "epilepsy", "seizures", "seizure"),
        icd10="G40.909",
    ),
    AnatomicalMarkerType(
        type="stroke_history",
        display_name="Stroke History",
        category="neurological",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(50, 5),
        keywords=(
            "stroke",
            "cerebrovascular accident",
            "cva",
            "transient ischemic attack",
        ),
        icd10="I69.30",
    ),
    AnatomicalMarkerType(
        type="hemiparesis",
        display_name="Hemiparesis",
        category="neurological",
        default_body_region="arm_and_leg",
        default_body_view="front",
        default_position=Position(36, 50),
        laterality=Lateralizable(left=Position(64, 50), right=Position(36, 50)),
        keywords=("hemiparesis", "hemiplegia", "one-sided weakness"),
        icd10="G81.90",
    ),
    AnatomicalMarkerType(
        type="dementia",
        display_name="Dementia",
        category="neurological",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(50, 5),
        keywords=(
            "dementia",
            "alzheimer's",
            "alzheimers",
            "cognitive impairment",
            "memory impairment",
        ),
        icd10="F03.90",
    ),
    AnatomicalMarkerType(
        type="parkinsons_disease",
        display_name="Parkinson's Disease",
        category="neurological",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(50, 5),
        keywords=("parkinson's", "parkinsons", "parkinson disease"),
        icd10="G20",
    ),
    AnatomicalMarkerType(
        type="multiple_sclerosis",
        display_name="Multiple Sclerosis",
        category="neurological",
        default_body_region="spine",
        default_body_view="back",
        default_position=Position(50, 30),
        keywords=("multiple sclerosis",),
        icd10="G35",
    ),
    AnatomicalMarkerType(
        type="spinal_cord_injury",
        display_name="Spinal Cord Injury",
        category="neurological",
        default_body_region="spine",
        default_body_view="back",
        default_position=Position(50, 35),
        keywords=(
            "spinal cord injury",
            "paraplegia",
            "quadriplegia",
            "tetraplegia",
        ),
        icd10="G95.9",
    ),
    AnatomicalMarkerType(
        type="peripheral_neuropathy",
        display_name="Peripheral Neuropathy",
        category="neurological",
        default_body_region="feet",
        default_body_view="front",
        default_position=Position(50, 95),
        keywords=("peripheral neuropathy", "neuropathy"),
        icd10="G62.9",
    ),
    AnatomicalMarkerType(
        type="traumatic_brain_injury",
        display_name="Traumatic Brain Injury",
        category="neurological",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(50, 4),
        keywords=("traumatic brain injury", "tbi", "brain injury", "concussion"),
        icd10="S06.9",
    ),
)
