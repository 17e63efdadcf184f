"""Thoracic domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, morphological_stage, stage, table

LUNG = DiagnosticDomain(
    name="lung",
    math_algorithms=morphological_stage(
        nuclear="nuclear_morphometry",
        cellularity="multiscale_feature_extraction",
        architecture="lepidic_pattern_recognition",
        differentiation="keratinization_detection",
        mitoses="mitotic_counting",
    ),
    ai_algorithms=stage(
        ("cnn_intensity_profile", 67.0, "intensity"),
        ("edge_density", 33.0, "edges"),
    ),
    math_weight=0.7,
    ai_weight=0.3,
    confidence_ceiling=0.95,
    category_table=table(
        "who_classification",
        (0.8, "Poorly differentiated carcinoma"),
        (0.6, "Moderately differentiated carcinoma"),
        (0.4, "Well differentiated carcinoma"),
        (0.0, "Atypical adenomatous hyperplasia/reactive changes"),
    ),
    secondary_tables={
        "iaslc_grade": table(
            "iaslc_grade",
            (0.66, "G3 - High grade"),
            (0.31, "G2 - Intermediate grade"),
            (0.0, "G1 - Low grade"),
        ),
    },
)

DOMAINS = (LUNG,)
