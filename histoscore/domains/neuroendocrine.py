"""Central nervous system and adrenal domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, stage, table

BRAIN = DiagnosticDomain(
    name="brain",
    math_algorithms=stage(
        ("who_cns_grade", 30.0, "nuclear"),
        ("cellular_density", 25.0, "cellularity"),
        ("nuclear_atypia", 15.0, "nuclear"),
        ("mitotic_activity", 15.0, "mitoses"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("microvascular_proliferation", 10.0, "edges"),
        ("necrosis_detection", 5.0, "intensity"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    # Bounds sit halfway between the per-grade scores 0.15, 0.45, 0.75 and 0.95.
    category_table=table(
        "who_cns_grade",
        (0.85, "Grade IV (Glioblastoma)"),
        (0.6, "Grade III (Anaplastic)"),
        (0.3, "Grade II (Low Malignant)"),
        (0.0, "Grade I (Benign)"),
    ),
)

ADRENAL = DiagnosticDomain(
    name="adrenal",
    math_algorithms=stage(
        ("weiss_score", 35.0, "nuclear"),
        ("functional_status", 25.0, "differentiation"),
        ("invasion_assessment", 15.0, "cellularity"),
        ("cortical_architecture", 10.0, "architecture"),
        share=85.0,
    ),
    ai_algorithms=stage(
        ("endocrine_function", 10.0, "intensity"),
        ("ensat_staging", 5.0, "edges"),
        share=15.0,
    ),
    math_weight=0.85,
    ai_weight=0.15,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.5, "Adrenocortical carcinoma"),
        (0.0, "Adrenocortical adenoma"),
    ),
    secondary_tables={
        "ensat_stage": table(
            "ensat_stage",
            (0.8, "Stage III-IV"),
            (0.6, "Stage II"),
            (0.0, "Stage I"),
        ),
    },
)

DOMAINS = (BRAIN, ADRENAL)
