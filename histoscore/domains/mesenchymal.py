"""Soft tissue and bone domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, stage, table

SOFT_TISSUE = DiagnosticDomain(
    name="soft_tissue",
    math_algorithms=stage(
        ("sarcoma_classification", 34.0, "cellularity"),
        ("cellular_morphology", 28.0, "nuclear"),
        ("who_fnclcc_grade", 21.0, "mitoses"),
        ("growth_pattern", 9.0, "architecture"),
        share=92.0,
    ),
    ai_algorithms=stage(
        ("differentiation_pattern", 5.0, "intensity"),
        ("vascular_invasion", 3.0, "edges"),
        share=8.0,
    ),
    math_weight=0.92,
    ai_weight=0.08,
    # FNCLCC total of 2-8 points mapped onto [0, 1]: grade 2 from 4 points, grade 3 from 6.
    category_table=table(
        "fnclcc_grade",
        (0.67, "Grade 3"),
        (0.33, "Grade 2"),
        (0.0, "Grade 1"),
    ),
    secondary_tables={
        "vascular_invasion": table(
            "vascular_invasion",
            (0.7, "Extensive Vascular Invasion"),
            (0.4, "Focal Vascular Invasion"),
            (0.0, "No Vascular Invasion Identified"),
        ),
    },
)

SARCOMA = DiagnosticDomain(
    name="sarcoma",
    math_algorithms=stage(
        ("fnclcc_grading", 30.0, "mitoses"),
        ("histological_subtype", 25.0, "architecture"),
        ("cellular_density", 20.0, "cellularity"),
        ("mitotic_activity", 10.0, "mitoses"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("necrosis_assessment", 10.0, "intensity"),
        ("vascular_invasion", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "fnclcc_grade",
        (0.75, "Grade 3"),
        (0.45, "Grade 2"),
        (0.0, "Grade 1"),
    ),
)

BONE = DiagnosticDomain(
    name="bone",
    math_algorithms=stage(
        ("histotype_classification", 35.0, "architecture"),
        ("osteoid_production", 15.0, "differentiation"),
        ("sarcoma_grade", 15.0, "nuclear"),
        share=65.0,
    ),
    ai_algorithms=stage(
        ("ihc_panel_correlation", 20.0, "intensity"),
        ("differential_ihc", 10.0, "edges"),
        ("molecular_correlation", 5.0, "intensity"),
        share=35.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "tumor_type",
        (0.7, "Osteosarcoma"),
        (0.5, "Chondrosarcoma"),
        (0.0, "Benign bone tumor"),
    ),
    secondary_tables={
        "grade": table("grade", (0.8, "Grade 3"), (0.6, "Grade 2"), (0.0, "Grade 1")),
        "matrix_production": table(
            "matrix_production",
            (0.6, "Abundant osteoid production"),
            (0.0, "Minimal matrix production"),
        ),
    },
)

DOMAINS = (SOFT_TISSUE, SARCOMA, BONE)
