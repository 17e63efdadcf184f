"""Lymphoma, leukemia and plasma cell domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, stage, table

NON_HODGKIN = DiagnosticDomain(
    name="non_hodgkin",
    math_algorithms=stage(
        ("b_t_cell_lineage_classification", 34.0, "cellularity"),
        ("cellular_morphology", 28.0, "nuclear"),
        ("growth_pattern_recognition", 21.0, "architecture"),
        ("nuclear_features", 9.0, "nuclear"),
        share=92.0,
    ),
    ai_algorithms=stage(
        ("immunophenotype_correlates", 5.0, "intensity"),
        ("clonality_indicators", 3.0, "edges"),
        share=8.0,
    ),
    math_weight=0.92,
    ai_weight=0.08,
    category_table=table(
        "clonality",
        (0.8, "High probability of clonality"),
        (0.6, "Intermediate probability of clonality"),
        (0.4, "Low probability of clonality"),
        (0.0, "Likely reactive process"),
    ),
    secondary_tables={
        "nuclear_grade": table(
            "nuclear_grade",
            (0.85, "High-grade nuclear features"),
            (0.65, "Intermediate-grade nuclear features"),
            (0.45, "Low-grade nuclear features"),
            (0.0, "Reactive nuclear features"),
        ),
    },
)

HODGKIN = DiagnosticDomain(
    name="hodgkin",
    math_algorithms=stage(
        ("reed_sternberg_detection", 35.0, "nuclear"),
        ("nodular_sclerosis_pattern", 25.0, "architecture"),
        ("mixed_cellularity_pattern", 15.0, "cellularity"),
        share=75.0,
    ),
    ai_algorithms=stage(
        ("who_classification", 60.0, "intensity"),
        ("immunophenotype_profile", 40.0, "edges"),
    ),
    math_weight=0.75,
    ai_weight=0.25,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.5, "Hodgkin lymphoma"),
        (0.0, "Reactive lymphoid hyperplasia"),
    ),
)

LYMPHOMA = DiagnosticDomain(
    name="lymphoma",
    math_algorithms=stage(
        ("hodgkin_vs_non_hodgkin", 35.0, "nuclear"),
        ("cellular_composition", 25.0, "cellularity"),
        ("architectural_pattern", 15.0, "architecture"),
        ("growth_pattern", 10.0, "architecture"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("immunophenotype_correlation", 10.0, "intensity"),
        ("who_classification", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.6, "Lymphoma"),
        (0.0, "Reactive lymphoid hyperplasia"),
    ),
    secondary_tables={
        "grade": table(
            "grade",
            (0.8, "High Grade"),
            (0.6, "Intermediate Grade"),
            (0.0, "Low Grade"),
        ),
    },
)

LEUKEMIA = DiagnosticDomain(
    name="leukemia",
    math_algorithms=stage(
        ("leukemia_subtyping", 35.0, "nuclear"),
        ("flow_cytometry_correlation", 25.0, "cellularity"),
        ("molecular_marker_morphology", 15.0, "differentiation"),
        share=75.0,
    ),
    ai_algorithms=stage(
        ("flow_cytometry_prediction", 60.0, "intensity"),
        ("molecular_marker_prediction", 40.0, "edges"),
    ),
    math_weight=0.75,
    ai_weight=0.25,
    category_table=table(
        "risk",
        (0.8, "Very High Risk"),
        (0.6, "High Risk"),
        (0.3, "Intermediate Risk"),
        (0.0, "Low Risk"),
    ),
)

MYELOMA = DiagnosticDomain(
    name="myeloma",
    math_algorithms=stage(
        ("plasma_cell_morphology", 35.0, "nuclear"),
        ("nuclear_features", 25.0, "nuclear"),
        ("marrow_infiltration", 15.0, "cellularity"),
        ("cytoplasmic_features", 10.0, "differentiation"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("immunophenotype_correlation", 10.0, "intensity"),
        ("who_classification", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.75, "Multiple Myeloma - High Risk"),
        (0.55, "Multiple Myeloma - Intermediate Risk"),
        (0.35, "Multiple Myeloma - Low Risk / MGUS"),
        (0.0, "Reactive Plasmacytosis"),
    ),
    secondary_tables={
        "marrow_infiltration": table(
            "marrow_infiltration",
            (0.7, "Extensive bone marrow infiltration"),
            (0.4, "Moderate bone marrow infiltration"),
            (0.0, "Minimal bone marrow infiltration"),
        ),
    },
)

DOMAINS = (NON_HODGKIN, HODGKIN, LYMPHOMA, LEUKEMIA, MYELOMA)
