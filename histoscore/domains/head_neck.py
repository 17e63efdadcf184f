"""Head and neck, thyroid and ocular domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, stage, table

HEAD_NECK = DiagnosticDomain(
    name="head_neck",
    math_algorithms=stage(
        ("anatomical_site_classification", 30.0, "architecture"),
        ("hpv_status_morphology", 25.0, "nuclear"),
        ("invasion_depth", 15.0, "cellularity"),
        share=70.0,
    ),
    ai_algorithms=stage(
        ("multidisciplinary_hpv_prediction", 18.0, "intensity"),
        ("ebv_association", 12.0, "edges"),
        share=30.0,
    ),
    math_weight=0.75,
    ai_weight=0.25,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.5, "Head and neck squamous cell carcinoma"),
        (0.0, "Benign head and neck lesion"),
    ),
)

ORAL = DiagnosticDomain(
    name="oral",
    math_algorithms=stage(
        ("oscc_classification", 35.0, "nuclear"),
        ("nuclear_features", 27.0, "nuclear"),
        ("invasion_pattern", 22.0, "cellularity"),
        ("differentiation_grade", 8.0, "differentiation"),
        share=92.0,
    ),
    ai_algorithms=stage(
        ("perineural_invasion", 5.0, "edges"),
        ("vascular_invasion", 3.0, "intensity"),
        share=8.0,
    ),
    math_weight=0.92,
    ai_weight=0.08,
    category_table=table(
        "nuclear_atypia",
        (0.8, "Severe Nuclear Atypia"),
        (0.6, "Moderate Nuclear Atypia"),
        (0.4, "Mild Nuclear Atypia"),
        (0.0, "Minimal Nuclear Atypia"),
    ),
    secondary_tables={
        "invasion": table(
            "invasion",
            (0.8, "Deep Invasion"),
            (0.6, "Moderate Invasion"),
            (0.4, "Superficial Invasion"),
            (0.0, "Minimal Invasion"),
        ),
        "perineural_invasion": table(
            "perineural_invasion",
            (0.7, "Extensive Perineural Invasion"),
            (0.4, "Focal Perineural Invasion"),
            (0.0, "No Perineural Invasion Identified"),
        ),
    },
)

THYROID = DiagnosticDomain(
    name="thyroid",
    math_algorithms=stage(
        ("papillary_follicular_classification", 32.0, "architecture"),
        ("bethesda_category", 28.0, "nuclear"),
        ("nuclear_features", 22.0, "nuclear"),
        ("capsular_invasion", 9.0, "cellularity"),
        share=91.0,
    ),
    ai_algorithms=stage(
        ("follicular_pattern_recognition", 6.0, "edges"),
        ("molecular_marker_indicators", 3.0, "intensity"),
        share=9.0,
    ),
    math_weight=0.91,
    ai_weight=0.09,
    confidence_ceiling=0.98,
    category_table=table(
        "malignancy_potential",
        (0.8, "High malignancy potential"),
        (0.6, "Intermediate malignancy potential"),
        (0.4, "Low malignancy potential"),
        (0.0, "Benign nuclear features"),
    ),
    # Categories II-VI spread evenly; category I needs adequacy data a score cannot carry.
    secondary_tables={
        "bethesda_category": table(
            "bethesda_category",
            (0.9, "VI - Malignant"),
            (0.7, "V - Suspicious for Malignancy"),
            (0.5, "IV - Follicular Neoplasm or Suspicious for Follicular Neoplasm"),
            (0.3, "III - Atypia of Undetermined Significance or Follicular Lesion of Undetermined Significance"),
            (0.0, "II - Benign"),
        ),
    },
)

EYE = DiagnosticDomain(
    name="eye",
    math_algorithms=stage(
        ("uveal_melanoma_classification", 35.0, "nuclear"),
        ("retinal_architecture", 25.0, "architecture"),
        ("ophthalmic_structure", 15.0, "cellularity"),
        ("tumor_location", 10.0, "differentiation"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("genetic_risk_assessment", 10.0, "intensity"),
        ("prognostic_markers", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "tumor_type",
        (0.7, "Uveal melanoma"),
        (0.5, "Retinal tumor"),
        (0.0, "Benign ocular lesion"),
    ),
    secondary_tables={
        "tumor_location": table("tumor_location", (0.6, "Posterior segment"), (0.0, "Anterior segment")),
        "uveal_risk": table(
            "uveal_risk",
            (0.8, "High-risk uveal melanoma"),
            (0.6, "Intermediate-risk uveal melanoma"),
            (0.0, "Low-risk melanoma"),
        ),
    },
)

DOMAINS = (HEAD_NECK, ORAL, THYROID, EYE)
