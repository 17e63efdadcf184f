"""Breast and gynecologic domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, morphological_stage, stage, table
from histoscore.ensemble.algorithm import AlgorithmSpec
from histoscore.extractors import edge_density, intensity_profile

BREAST = DiagnosticDomain(
    name="breast",
    math_algorithms=morphological_stage(
        nuclear="nuclear_pleomorphism",
        cellularity="tumor_cellularity",
        architecture="tubule_formation",
        differentiation="stromal_reaction",
        mitoses="mitotic_count",
    ),
    ai_algorithms=(
        AlgorithmSpec("breast_cnn_profile", 60.0, intensity_profile()),
        AlgorithmSpec("molecular_subtype_edges", 40.0, edge_density(edge_threshold=0.12)),
    ),
    math_weight=0.77,
    ai_weight=0.23,
    category_table=table(
        "category",
        (0.75, "Invasive carcinoma - high suspicion"),
        (0.55, "Invasive carcinoma - intermediate suspicion"),
        (0.35, "Atypical proliferation"),
        (0.0, "Benign breast tissue"),
    ),
    secondary_tables={
        "nottingham_grade": table(
            "nottingham_grade",
            (0.7, "Grade III"),
            (0.45, "Grade II"),
            (0.0, "Grade I"),
        ),
    },
)

OVARIAN = DiagnosticDomain(
    name="ovarian",
    math_algorithms=stage(
        ("brca_mutation_pattern", 25.0, "nuclear"),
        ("hrd_status", 20.0, "cellularity"),
        ("endometrioid_subtype", 20.0, "architecture"),
        ("papillary_pattern", 10.0, "architecture"),
        ("serous_subtype", 10.0, "differentiation"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("parp_response_prediction", 10.0, "intensity"),
        ("molecular_subtype_integration", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.95,
    category_table=table(
        "category",
        (0.8, "High-grade serous ovarian carcinoma, BRCA-associated pattern"),
        (0.6, "High-grade serous ovarian carcinoma"),
        (0.4, "Ovarian carcinoma, indeterminate grade"),
        (0.0, "Benign ovarian lesion or low-grade neoplasm"),
    ),
    secondary_tables={
        "hrd_status": table("hrd_status", (0.5, "HRD-positive"), (0.0, "HRD-negative")),
    },
)

UTERINE = DiagnosticDomain(
    name="uterine",
    math_algorithms=stage(
        ("who_grade", 30.0, "nuclear"),
        ("histological_subtype", 25.0, "architecture"),
        ("myometrial_invasion", 20.0, "cellularity"),
        ("nuclear_features", 10.0, "nuclear"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("lymphovascular_invasion", 10.0, "edges"),
        ("mmr_msi_status", 5.0, "intensity"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "who_grade",
        (0.7, "FIGO Grade 3"),
        (0.4, "FIGO Grade 2"),
        (0.0, "FIGO Grade 1"),
    ),
    secondary_tables={
        "myometrial_invasion": table(
            "myometrial_invasion",
            (0.5, "Invasion of half or more of the myometrium"),
            (0.0, "Invasion of less than half of the myometrium"),
        ),
    },
)

CERVICAL = DiagnosticDomain(
    name="cervical",
    math_algorithms=stage(
        ("hpv_correlation", 30.0, "nuclear"),
        ("stromal_invasion", 25.0, "cellularity"),
        ("differentiation_grade", 15.0, "differentiation"),
        share=70.0,
    ),
    ai_algorithms=stage(
        ("cin_grade", 18.0, "intensity"),
        ("lymphovascular_invasion", 12.0, "edges"),
        share=30.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "cancer_type",
        (0.8, "Invasive squamous cell carcinoma"),
        (0.6, "Adenocarcinoma"),
        (0.0, "High-grade dysplasia"),
    ),
    secondary_tables={
        "hpv_status": table("hpv_status", (0.7, "HPV-positive"), (0.0, "HPV-status unclear")),
        "invasion": table(
            "invasion",
            (0.8, "Deep invasion"),
            (0.6, "Superficial invasion"),
            (0.0, "In-situ"),
        ),
    },
)

DOMAINS = (BREAST, OVARIAN, UTERINE, CERVICAL)
