"""Genitourinary domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, morphological_stage, stage, table
from histoscore.ensemble.aggregator import ConfidencePolicy

PROSTATE = DiagnosticDomain(
    name="prostate",
    math_algorithms=morphological_stage(
        nuclear="nuclear_atypia",
        cellularity="gland_density",
        architecture="gleason_pattern_analysis",
        differentiation="cribriform_detection",
        mitoses="proliferation_index",
    ),
    ai_algorithms=stage(
        ("prostate_cnn_profile", 64.0, "intensity"),
        ("gland_boundary_edges", 36.0, "edges"),
    ),
    math_weight=0.8,
    ai_weight=0.2,
    confidence_ceiling=0.98,
    confidence_policy=ConfidencePolicy.CONSERVATIVE,
    category_table=table(
        "category",
        (0.7, "Adenocarcinoma - high risk"),
        (0.5, "Adenocarcinoma - intermediate risk"),
        (0.35, "Atypical small acinar proliferation"),
        (0.0, "Benign prostatic tissue"),
    ),
    secondary_tables={
        "isup_grade_group": table(
            "isup_grade_group",
            (0.85, "Grade Group 5"),
            (0.7, "Grade Group 4"),
            (0.55, "Grade Group 3"),
            (0.4, "Grade Group 2"),
            (0.0, "Grade Group 1"),
        ),
    },
)

BLADDER = DiagnosticDomain(
    name="bladder",
    math_algorithms=stage(
        ("who_isup_grade", 38.3, "nuclear"),
        ("t_stage_invasion", 30.8, "cellularity"),
        ("histological_subtype", 20.0, "differentiation"),
        ("growth_pattern", 10.9, "architecture"),
    ),
    ai_algorithms=stage(
        ("urothelial_cnn_profile", 65.0, "intensity"),
        ("lymphovascular_invasion_edges", 35.0, "edges"),
    ),
    math_weight=0.92,
    ai_weight=0.08,
    confidence_ceiling=0.918,
    category_table=table(
        "category",
        (0.7, "Urothelial carcinoma"),
        (0.4, "Urothelial dysplasia"),
        (0.0, "Benign urothelial lesion"),
    ),
    secondary_tables={
        "who_isup_grade": table(
            "who_isup_grade",
            (0.8, "High Grade"),
            (0.4, "Low Grade"),
            (0.0, "PUNLMP (Papillary Urothelial Neoplasm of Low Malignant Potential)"),
        ),
        "t_stage": table(
            "t_stage",
            (0.85, "T3-T4 (Perivesical/Organ Invasion)"),
            (0.65, "T2 (Muscularis Propria Invasion)"),
            (0.45, "T1 (Lamina Propria Invasion)"),
            (0.0, "Ta (Non-invasive Papillary)"),
        ),
        "histological_subtype": table(
            "histological_subtype",
            (0.8, "Conventional Urothelial Carcinoma"),
            (0.6, "Urothelial Carcinoma with Squamous Differentiation"),
            (0.4, "Urothelial Carcinoma with Glandular Differentiation"),
            (0.0, "Mixed Histological Pattern"),
        ),
    },
)

KIDNEY = DiagnosticDomain(
    name="kidney",
    math_algorithms=stage(
        ("clear_cell_rcc_recognition", 32.7, "cellularity"),
        ("chromophobe_rcc_detection", 25.4, "nuclear"),
        ("papillary_rcc_classification", 18.9, "architecture"),
        ("fuhrman_grade", 14.6, "nuclear"),
        ("sarcomatoid_features", 8.4, "mitoses"),
    ),
    ai_algorithms=stage(
        ("who_rcc_classifier", 70.0, "intensity"),
        ("tumor_segmentation", 30.0, "edges"),
    ),
    math_weight=0.5,
    ai_weight=0.5,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.6, "Renal cell carcinoma"),
        (0.0, "Benign renal lesion"),
    ),
)

TESTICULAR = DiagnosticDomain(
    name="testicular",
    math_algorithms=stage(
        ("germ_cell_tumor_classification", 30.0, "differentiation"),
        ("cellular_morphology", 25.0, "cellularity"),
        ("nuclear_features", 20.0, "nuclear"),
        ("vascular_invasion", 10.0, "architecture"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("tumor_marker_correlates", 10.0, "intensity"),
        ("differentiation_pattern", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.45, "Germ cell tumor pattern"),
        (0.0, "No germ cell tumor pattern"),
    ),
    secondary_tables={
        "vascular_invasion": table(
            "vascular_invasion",
            (0.85, "Extensive lymphovascular invasion"),
            (0.6, "Lymphovascular invasion present"),
            (0.4, "Vascular penetration"),
            (0.0, "No vascular invasion"),
        ),
    },
)

DOMAINS = (PROSTATE, BLADDER, KIDNEY, TESTICULAR)
