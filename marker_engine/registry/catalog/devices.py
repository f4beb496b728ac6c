"""Device, wound and implant marker types.

Front view coordinates put the patient's right side on the viewer's left
(x < 50). Back view coordinates put the patient's right side on the
viewer's right (x > 50).
"""

from marker_engine.registry.models import (
    AnatomicalMarkerType,
    Lateralizable,
    Position,
)

VASCULAR_ACCESS: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="picc_line",
        display_name="PICC Line",
        category="moderate",
        default_body_region="upper_arm",
        default_body_view="front",
        default_position=Position(22, 35),
        laterality=Lateralizable(left=Position(78, 35), right=Position(22, 35)),
        keywords=(
            "picc line",
            "picc",
            "peripherally inserted central catheter",
            "double lumen picc",
            "triple lumen picc",
        ),
    ),
    AnatomicalMarkerType(
        type="central_line",
        display_name="Central Line",
        category="critical",
        default_body_region="upper_chest",
        default_body_view="front",
        default_position=Position(38, 22),
        laterality=Lateralizable(left=Position(62, 22), right=Position(38, 22)),
        keywords=(
            "central line",
            "central venous catheter",
            "cvad",
            "cvc",
            "subclavian line",
            "internal jugular line",
            "ij line",
            "triple lumen catheter",
        ),
    ),
    AnatomicalMarkerType(
        type="peripheral_iv",
        display_name="Peripheral IV",
        category="informational",
        default_body_region="forearm",
        default_body_view="front",
        default_position=Position(16, 48),
        laterality=Lateralizable(left=Position(84, 48), right=Position(16, 48)),
        keywords=(
            "peripheral iv",
            "iv line",
            "iv catheter",
            "saline lock",
            "hep lock",
        ),
    ),
    AnatomicalMarkerType(
        type="arterial_line",
        display_name="Arterial Line",
        category="critical",
        default_body_region="wrist",
        default_body_view="front",
        default_position=Position(14, 50),
        laterality=Lateralizable(left=Position(86, 50), right=Position(14, 50)),
        keywords=("arterial line", "art line", "a-line", "radial arterial line"),
    ),
    AnatomicalMarkerType(
        type="port_a_cath",
        display_name="Implanted Port",
        category="moderate",
        default_body_region="chest",
        default_body_view="front",
        default_position=Position(36, 26),
        laterality=Lateralizable(left=Position(64, 26), right=Position(36, 26)),
        keywords=(
            "port-a-cath",
            "port a cath",
            "implanted port",
            "mediport",
            "power port",
            "chest port",
        ),
    ),
    AnatomicalMarkerType(
        type="dialysis_catheter",
        display_name="Dialysis Catheter",
        category="critical",
        default_body_region="upper_chest",
        default_body_view="front",
        default_position=Position(40, 20),
        laterality=Lateralizable(left=Position(60, 20), right=Position(40, 20)),
        keywords=(
            "dialysis catheter",
            "hemodialysis catheter",
            "tunneled dialysis catheter",
            "permcath",
            "quinton catheter",
        ),
    ),
    AnatomicalMarkerType(
        type="midline_catheter",
        display_name="Midline Catheter",
        category="moderate",
        default_body_region="upper_arm",
        default_body_view="front",
        default_position=Position(24, 32),
        laterality=Lateralizable(left=Position(76, 32), right=Position(24, 32)),
        keywords=("midline catheter", "midline iv"),
    ),
    AnatomicalMarkerType(
        type="av_fistula",
        display_name="AV Fistula",
        category="moderate",
        default_body_region="forearm",
        default_body_view="front",
        default_position=Position(18, 44),
        laterality=Lateralizable(left=Position(82, 44), right=Position(18, 44)),
        keywords=(
            "av fistula",
            "arteriovenous fistula",
            "av graft",
            "dialysis fistula",
        ),
        icd10="Z99.2",
    ),
)

VEIN_ACCESS: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="difficult_iv_access",
        display_name="Difficult IV Access",
        category="moderate",
        default_body_region="antecubital",
        default_body_view="front",
        default_position=Position(20, 40),
        laterality=Lateralizable(left=Position(80, 40), right=Position(20, 40)),
        keywords=(
            "difficult iv access",
            "difficult venous access",
            "poor venous access",
            "difficult stick",
            "hard stick",
        ),
    ),
    AnatomicalMarkerType(
        type="preferred_vein_site",
        display_name="Preferred Vein Site",
        category="informational",
        default_body_region="antecubital",
        default_body_view="front",
        default_position=Position(20, 40),
        laterality=Lateralizable(left=Position(80, 40), right=Position(20, 40)),
        keywords=(
            "preferred vein",
            "preferred iv site",
            "best vein",
            "good veins",
            "good vein",
        ),
    ),
    AnatomicalMarkerType(
        type="ultrasound_guided_access",
        display_name="Ultrasound-Guided IV Only",
        category="monitoring",
        default_body_region="upper_arm",
        default_body_view="front",
        default_position=Position(22, 37),
        laterality=Lateralizable(left=Position(78, 37), right=Position(22, 37)),
        keywords=(
            "ultrasound guided iv",
            "us guided iv",
            "requires ultrasound for iv",
            "vein finder",
        ),
    ),
    AnatomicalMarkerType(
        type="vein_preservation",
        display_name="Vein Preservation",
        category="informational",
        default_body_region="forearm",
        default_body_view="front",
        default_position=Position(18, 46),
        laterality=Lateralizable(left=Position(82, 46), right=Position(18, 46)),
        keywords=("vein preservation", "save veins", "preserve veins"),
    ),
    AnatomicalMarkerType(
        type="limb_restriction",
        display_name="Limb Restriction",
        category="critical",
        default_body_region="upper_arm",
        default_body_view="front",
        default_position=Position(24, 30),
        laterality=Lateralizable(left=Position(76, 30), right=Position(24, 30)),
        keywords=(
            "limb restriction",
            "restricted limb",
            "restricted arm",
            "no blood pressure",
            "no blood draws",
            "no needle sticks",
            "no bp",
        ),
    ),
)

DRAINAGE_TUBES: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="foley_catheter",
        display_name="Foley Catheter",
        category="moderate",
        default_body_region="pelvis",
        default_body_view="front",
        default_position=Position(50, 56),
        keywords=(
            "foley catheter",
            "foley",
            "indwelling urinary catheter",
            "urinary catheter",
        ),
    ),
    AnatomicalMarkerType(
        type="suprapubic_catheter",
        display_name="Suprapubic Catheter",
        category="moderate",
        default_body_region="lower_abdomen",
        default_body_view="front",
        default_position=Position(50, 53),
        keywords=("suprapubic catheter", "suprapubic tube", "sp catheter"),
    ),
    AnatomicalMarkerType(
        type="chest_tube",
        display_name="Chest Tube",
        category="critical",
        default_body_region="lateral_chest",
        default_body_view="front",
        default_position=Position(32, 32),
        laterality=Lateralizable(left=Position(68, 32), right=Position(32, 32)),
        keywords=(
            "chest tube",
            "thoracostomy tube",
            "pleural drain",
            "pigtail catheter",
        ),
    ),
    AnatomicalMarkerType(
        type="ng_tube",
        display_name="Nasogastric Tube",
        category="moderate",
        default_body_region="nose",
        default_body_view="front",
        default_position=Position(50, 8),
        keywords=("nasogastric tube", "ng tube", "dobhoff", "nasal feeding tube"),
    ),
    AnatomicalMarkerType(
        type="g_tube",
        display_name="Gastrostomy Tube",
        category="moderate",
        default_body_region="upper_abdomen",
        default_body_view="front",
        default_position=Position(55, 42),
        keywords=("gastrostomy tube", "gastrostomy", "g-tube", "g tube", "peg tube"),
    ),
    AnatomicalMarkerType(
        type="j_tube",
        display_name="Jejunostomy Tube",
        category="moderate",
        default_body_region="upper_abdomen",
        default_body_view="front",
        default_position=Position(57, 46),
        keywords=("jejunostomy tube", "jejunostomy", "j-tube", "j tube", "peg-j"),
    ),
    AnatomicalMarkerType(
        type="jp_drain",
        display_name="JP Drain",
        category="moderate",
        default_body_region="abdomen",
        default_body_view="front",
        default_position=Position(42, 48),
        laterality=Lateralizable(left=Position(58, 48), right=Position(42, 48)),
        keywords=(
            "jp drain",
            "jackson-pratt",
            "jackson pratt",
            "bulb drain",
            "surgical drain",
        ),
    ),
    AnatomicalMarkerType(
        type="nephrostomy_tube",
        display_name="Nephrostomy Tube",
        category="moderate",
        default_body_region="flank",
        default_body_view="back",
        default_position=Position(62, 45),
        laterality=Lateralizable(left=Position(38, 45), right=Position(62, 45)),
        keywords=("nephrostomy tube", "nephrostomy", "pcn tube"),
    ),
    AnatomicalMarkerType(
        type="tracheostomy",
        display_name="Tracheostomy",
        category="critical",
        default_body_region="neck",
        default_body_view="front",
        default_position=Position(50, 15),
        keywords=("tracheostomy", "trach tube", "trach collar", "trach care"),
    ),
    AnatomicalMarkerType(
        type="endotracheal_tube",
        display_name="Endotracheal Tube",
        category="critical",
        default_body_region="mouth",
        default_body_view="front",
        default_position=Position(50, 10),
        keywords=(
            "endotracheal tube",
            "et tube",
            "intubated",
            "mechanical ventilation",
            "on the ventilator",
        ),
    ),
    AnatomicalMarkerType(
        type="ostomy",
        display_name="Ostomy",
        category="moderate",
        default_body_region="abdomen",
        default_body_view="front",
        default_position=Position(60, 50),
        laterality=Lateralizable(left=Position(60, 50), right=Position(40, 50)),
        keywords=(
            "colostomy",
            "ileostomy",
            "urostomy",
            "ostomy bag",
            "ostomy appliance",
        ),
    ),
    AnatomicalMarkerType(
        type="rectal_tube",
        display_name="Rectal Tube",
        category="moderate",
        default_body_region="sacrum",
        default_body_view="back",
        default_position=Position(50, 58),
        keywords=("rectal tube", "fecal management system", "flexi-seal"),
    ),
)

WOUNDS_SURGICAL: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="surgical_incision",
        display_name="Surgical Incision",
        category="moderate",
        default_body_region="abdomen",
        default_body_view="front",
        default_position=Position(50, 45),
        keywords=(
            "surgical incision",
            "incision",
            "surgical site",
            "sutures",
            "staples",
        ),
    ),
    AnatomicalMarkerType(
        type="pressure_injury",
        display_name="Pressure Injury",
        category="moderate",
        default_body_region="sacrum",
        default_body_view="back",
        default_position=Position(50, 56),
        keywords=(
            "pressure injury",
            "pressure ulcer",
            "pressure sore",
            "decubitus",
            "bedsore",
            "bed sore",
        ),
        icd10="L89.90",
    ),
    AnatomicalMarkerType(
        type="wound_vac",
        display_name="Wound VAC",
        category="moderate",
        default_body_region="abdomen",
        default_body_view="front",
        default_position=Position(50, 50),
        keywords=(
            "wound vac",
            "negative pressure wound therapy",
            "npwt",
            "vac dressing",
        ),
    ),
    AnatomicalMarkerType(
        type="skin_tear",
        display_name="Skin Tear",
        category="informational",
        default_body_region="forearm",
        default_body_view="front",
        default_position=Position(18, 46),
        laterality=Lateralizable(left=Position(82, 46), right=Position(18, 46)),
        keywords=("skin tear",),
    ),
    AnatomicalMarkerType(
        type="burn",
        display_name="Burn",
        category="moderate",
        default_body_region="torso",
        default_body_view="front",
        default_position=Position(50, 35),
        keywords=("burn wound", "burn injury", "thermal burn", "second degree burn"),
    ),
    AnatomicalMarkerType(
        type="diabetic_foot_ulcer",
        display_name="Diabetic Foot Ulcer",
        category="moderate",
        default_body_region="foot",
        default_body_view="front",
        default_position=Position(42, 96),
        laterality=Lateralizable(left=Position(58, 96), right=Position(42, 96)),
        keywords=("diabetic foot ulcer", "foot ulcer", "dfu"),
        icd10="E11.621",
    ),
    AnatomicalMarkerType(
        type="laceration",
        display_name="Laceration",
        category="informational",
        default_body_region="forearm",
        default_body_view="front",
        default_position=Position(18, 44),
        laterality=Lateralizable(left=Position(82, 44), right=Position(18, 44)),
        keywords=("laceration", "lac repair"),
    ),
)

ORTHOPEDIC: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="cast",
        display_name="Cast / Splint",
        category="moderate",
        default_body_region="forearm",
        default_body_view="front",
        default_position=Position(18, 46),
        laterality=Lateralizable(left=Position(82, 46), right=Position(18, 46)),
        keywords=(
            "arm cast",
            "leg cast",
            "plaster cast",
            "fiberglass cast",
            "splint",
        ),
    ),
    AnatomicalMarkerType(
        type="external_fixator",
        display_name="External Fixator",
        category="moderate",
        default_body_region="lower_leg",
        default_body_view="front",
        default_position=Position(42, 82),
        laterality=Lateralizable(left=Position(58, 82), right=Position(42, 82)),
        keywords=("external fixator", "ex-fix", "ex fix"),
    ),
    AnatomicalMarkerType(
        type="traction",
        display_name="Traction",
        category="moderate",
        default_body_region="leg",
        default_body_view="front",
        default_position=Position(42, 70),
        laterality=Lateralizable(left=Position(58, 70), right=Position(42, 70)),
        keywords=(
            "skeletal traction",
            "skin traction",
            "buck's traction",
            "bucks traction",
        ),
    ),
    AnatomicalMarkerType(
        type="hip_replacement",
        display_name="Hip Replacement",
        category="informational",
        default_body_region="hip",
        default_body_view="front",
        default_position=Position(38, 55),
        laterality=Lateralizable(left=Position(62, 55), right=Position(38, 55)),
        keywords=("hip replacement", "total hip arthroplasty", "total hip"),
        icd10="Z96.649",
    ),
    AnatomicalMarkerType(
        type="knee_replacement",
        display_name="Knee Replacement",
        category="informational",
        default_body_region="knee",
        default_body_view="front",
        default_position=Position(42, 75),
        laterality=Lateralizable(left=Position(58, 75), right=Position(42, 75)),
        keywords=("knee replacement", "total knee arthroplasty", "total knee", "tka"),
        icd10="Z96.659",
    ),
    AnatomicalMarkerType(
        type="cervical_collar",
        display_name="Cervical Collar",
        category="moderate",
        default_body_region="neck",
        default_body_view="front",
        default_position=Position(50, 14),
        keywords=("cervical collar", "c-collar", "c collar", "neck brace"),
    ),
    AnatomicalMarkerType(
        type="amputation",
        display_name="Amputation",
        category="moderate",
        default_body_region="knee",
        default_body_view="front",
        default_position=Position(42, 78),
        laterality=Lateralizable(left=Position(58, 78), right=Position(42, 78)),
        keywords=(
            "amputation",
            "below knee amputation",
            "above knee amputation",
            "residual limb",
        ),
    ),
)

MONITORING_DEVICES: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="cardiac_monitor",
        display_name="Cardiac Monitor",
        category="monitoring",
        default_body_region="chest",
        default_body_view="front",
        default_position=Position(50, 28),
        keywords=("cardiac monitor", "telemetry", "tele box", "holter monitor"),
    ),
    AnatomicalMarkerType(
        type="pulse_oximeter",
        display_name="Pulse Oximeter",
        category="monitoring",
        default_body_region="finger",
        default_body_view="front",
        default_position=Position(12, 54),
        laterality=Lateralizable(left=Position(88, 54), right=Position(12, 54)),
        keywords=("pulse oximeter", "pulse ox", "spo2 probe"),
    ),
    AnatomicalMarkerType(
        type="continuous_glucose_monitor",
        display_name="Continuous Glucose Monitor",
        category="monitoring",
        default_body_region="upper_arm",
        default_body_view="back",
        default_position=Position(78, 32),
        laterality=Lateralizable(left=Position(22, 32), right=Position(78, 32)),
        keywords=(
            "continuous glucose monitor",
            "cgm",
            "dexcom",
            "freestyle libre",
            "libre sensor",
        ),
    ),
    AnatomicalMarkerType(
        type="insulin_pump",
        display_name="Insulin Pump",
        category="monitoring",
        default_body_region="abdomen",
        default_body_view="front",
        default_position=Position(44, 48),
        laterality=Lateralizable(left=Position(56, 48), right=Position(44, 48)),
        keywords=("insulin pump", "omnipod", "tandem pump"),
    ),
    AnatomicalMarkerType(
        type="icp_monitor",
        display_name="ICP Monitor / EVD",
        category="critical",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(50, 4),
        keywords=(
            "icp monitor",
            "intracranial pressure monitor",
            "external ventricular drain",
            "ventriculostomy",
            "evd",
        ),
    ),
    AnatomicalMarkerType(
        type="wearable_defibrillator",
        display_name="Wearable Defibrillator",
        category="monitoring",
        default_body_region="chest",
        default_body_view="front",
        default_position=Position(50, 27),
        keywords=("wearable defibrillator", "lifevest", "life vest", "zoll vest"),
    ),
)

IMPLANTS: tuple[AnatomicalMarkerType, ...] = (
    AnatomicalMarkerType(
        type="pacemaker",
        display_name="Pacemaker",
        category="monitoring",
        default_body_region="upper_chest",
        default_body_view="front",
        default_position=Position(60, 24),
        laterality=Lateralizable(left=Position(60, 24), right=Position(40, 24)),
        keywords=("pacemaker", "permanent pacemaker", "permanent pacer"),
        icd10="Z95.0",
    ),
    AnatomicalMarkerType(
        type="icd_device",
        display_name="Implantable Defibrillator",
        category="monitoring",
        default_body_region="upper_chest",
        default_body_view="front",
        default_position=Position(60, 24),
        laterality=Lateralizable(left=Position(60, 24), right=Position(40, 24)),
        keywords=(
            "implantable cardioverter defibrillator",
            "implanted defibrillator",
            "aicd",
        ),
        icd10="Z95.810",
    ),
    AnatomicalMarkerType(
        type="lvad",
        display_name="LVAD",
        category="critical",
        default_body_region="chest",
        default_body_view="front",
        default_position=Position(55, 34),
        keywords=("lvad", "left ventricular assist device"),
        icd10="Z95.811",
    ),
    AnatomicalMarkerType(
        type="vp_shunt",
        display_name="VP Shunt",
        category="informational",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(44, 7),
        laterality=Lateralizable(left=Position(56, 7), right=Position(44, 7)),
        keywords=("vp shunt", "ventriculoperitoneal shunt", "programmable shunt"),
        icd10="Z98.2",
    ),
    AnatomicalMarkerType(
        type="cochlear_implant",
        display_name="Cochlear Implant",
        category="informational",
        default_body_region="ear",
        default_body_view="front",
        default_position=Position(42, 6),
        laterality=Lateralizable(left=Position(58, 6), right=Position(42, 6)),
        keywords=("cochlear implant",),
        icd10="Z96.21",
    ),
    AnatomicalMarkerType(
        type="deep_brain_stimulator",
        display_name="Deep Brain Stimulator",
        category="informational",
        default_body_region="head",
        default_body_view="front",
        default_position=Position(50, 3),
        keywords=("deep brain stimulator", "dbs"),
    ),
    AnatomicalMarkerType(
        type="spinal_cord_stimulator",
        display_name="Spinal Cord Stimulator",
        category="informational",
        default_body_region="lower_back",
        default_body_view="back",
        default_position=Position(50, 42),
        keywords=("spinal cord stimulator", "scs implant"),
    ),
    AnatomicalMarkerType(
        type="orthopedic_hardware",
        display_name="Orthopedic Hardware",
        category="informational",
        default_body_region="thigh",
        default_body_view="front",
        default_position=Position(42, 65),
        laterality=Lateralizable(left=Position(58, 65), right=Position(42, 65)),
        keywords=("orthopedic hardware", "internal fixation", "plate and screws"),
    ),
    AnatomicalMarkerType(
        type="ivc_filter",
        display_name="IVC Filter",
        category="informational",
        default_body_region="abdomen",
        default_body_view="front",
        default_position=Position(50, 44),
        keywords=("ivc filter", "inferior vena cava filter"),
        icd10="Z95.828",
    ),
    AnatomicalMarkerType(
        type="prosthetic_heart_valve",
        display_name="Prosthetic Heart Valve",
        category="informational",
        default_body_region="chest",
        default_body_view="front",
        default_position=Position(52, 28),
        keywords=(
            "mechanical heart valve",
            "mechanical valve",
            "prosthetic valve",
            "valve replacement",
        ),
        icd10="Z95.2",
    ),
)
