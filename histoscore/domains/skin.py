"""Cutaneous domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, stage, table

MELANOMA = DiagnosticDomain(
    name="melanoma",
    math_algorithms=stage(
        ("clark_level", 25.0, "architecture"),
        ("breslow_thickness", 25.0, "cellularity"),
        ("mitotic_rate", 20.0, "mitoses"),
        ("ulceration", 15.0, "differentiation"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("til_density", 10.0, "intensity"),
        ("regression_analysis", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.97,
    category_table=table(
        "category",
        (0.8, "Malignant melanoma"),
        (0.6, "Atypical melanocytic nevus"),
        (0.4, "Dysplastic nevus"),
        (0.0, "Benign nevus"),
    ),
)

DOMAINS = (MELANOMA,)
