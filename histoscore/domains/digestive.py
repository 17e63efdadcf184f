"""Gastrointestinal and hepatopancreatobiliary domains."""

from __future__ import annotations

from histoscore.domains.base import DiagnosticDomain, stage, table

COLON = DiagnosticDomain(
    name="colon",
    # Ten equally weighted morphological algorithms.
    math_algorithms=stage(
        ("glandular_architecture", 10.0, "architecture"),
        ("nuclear_pleomorphism", 10.0, "nuclear"),
        ("mitotic_activity", 10.0, "mitoses"),
        ("tumor_budding", 10.0, "cellularity"),
        ("microsatellite_instability", 10.0, "differentiation"),
        ("spatial_distribution", 10.0, "cellularity"),
        ("texture_gradient", 10.0, "cellularity"),
        ("color_histogram", 10.0, "differentiation"),
        ("edge_density", 10.0, "architecture"),
        ("statistical_shape", 10.0, "nuclear"),
    ),
    ai_algorithms=stage(
        ("resnet_transfer_profile", 70.0, "intensity"),
        ("acrin_ct_integration", 30.0, "edges"),
    ),
    math_weight=0.8,
    ai_weight=0.2,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.6, "Adenocarcinoma"),
        (0.4, "Adenoma"),
        (0.0, "Normal"),
    ),
    secondary_tables={
        "who_grade": table(
            "who_grade",
            (0.8, "High Grade"),
            (0.65, "Intermediate Grade"),
            (0.0, "Low Grade"),
        ),
    },
)

GASTRIC = DiagnosticDomain(
    name="gastric",
    math_algorithms=stage(
        ("lauren_classification", 35.2, "architecture"),
        ("who_histological_typing", 26.8, "differentiation"),
        ("differentiation_grade", 20.1, "nuclear"),
        ("invasion_depth", 15.4, "cellularity"),
        ("lymphovascular_invasion", 7.5, "mitoses"),
    ),
    ai_algorithms=stage(
        ("gastric_cnn_profile", 61.0, "intensity"),
        ("multiscale_attention_edges", 39.0, "edges"),
    ),
    math_weight=0.82,
    ai_weight=0.18,
    confidence_ceiling=0.923,
    category_table=table(
        "category",
        (0.7, "Adenocarcinoma"),
        (0.4, "Dysplasia"),
        (0.0, "Benign"),
    ),
    secondary_tables={
        "lauren_type": table(
            "lauren_type",
            (0.7, "Diffuse Type"),
            (0.4, "Mixed Type"),
            (0.0, "Intestinal Type"),
        ),
        "who_type": table(
            "who_type",
            (0.8, "Signet Ring Cell Carcinoma"),
            (0.6, "Poorly Cohesive Carcinoma"),
            (0.0, "Adenocarcinoma NOS"),
        ),
        "differentiation_grade": table(
            "differentiation_grade",
            (0.7, "G3 (Poor)"),
            (0.5, "G2 (Moderate)"),
            (0.0, "G1 (Well)"),
        ),
        "t_stage": table("t_stage", (0.8, "T3-T4"), (0.5, "T2"), (0.0, "T1")),
        "lymphovascular_invasion": table("lymphovascular_invasion", (0.6, "Present"), (0.0, "Absent")),
    },
)

ESOPHAGEAL = DiagnosticDomain(
    name="esophageal",
    math_algorithms=stage(
        ("who_grading", 31.5, "nuclear"),
        ("invasion_depth", 30.3, "cellularity"),
        ("lymphovascular_invasion", 24.7, "architecture"),
        ("histotype", 13.5, "differentiation"),
    ),
    ai_algorithms=stage(
        ("perineural_invasion", 63.6, "edges"),
        ("tumor_budding", 36.4, "intensity"),
    ),
    math_weight=0.89,
    ai_weight=0.11,
    confidence_ceiling=0.97,
    # Grade points 3-9 mapped onto [0, 1]: G1 up to 4 points, G3 above 6.
    category_table=table(
        "who_grade",
        (0.58, "G3 (Poorly differentiated)"),
        (0.25, "G2 (Moderately differentiated)"),
        (0.0, "G1 (Well differentiated)"),
    ),
)

LIVER = DiagnosticDomain(
    name="liver",
    math_algorithms=stage(
        ("edmondson_steiner_grading", 40.0, "nuclear"),
        ("trabecular_pattern", 30.0, "architecture"),
        ("hepatocyte_morphometry", 20.0, "cellularity"),
        ("vascular_invasion", 10.0, "architecture"),
    ),
    ai_algorithms=stage(
        ("hepatocellular_cnn_profile", 66.7, "intensity"),
        ("multimodal_liver_edges", 33.3, "edges"),
    ),
    math_weight=0.88,
    ai_weight=0.12,
    confidence_ceiling=0.961,
    category_table=table(
        "category",
        (0.7, "Hepatocellular carcinoma"),
        (0.4, "Dysplastic nodule"),
        (0.0, "Benign"),
    ),
    secondary_tables={
        "edmondson_steiner_grade": table(
            "edmondson_steiner_grade",
            (0.85, "Grade I (Well Differentiated)"),
            (0.65, "Grade II (Moderately Differentiated)"),
            (0.45, "Grade III (Poorly Differentiated)"),
            (0.0, "Grade IV (Undifferentiated)"),
        ),
        "trabecular_pattern": table(
            "trabecular_pattern",
            (0.7, "Well-formed Trabecular"),
            (0.4, "Disrupted Trabecular"),
            (0.0, "Solid Pattern"),
        ),
        "vascular_invasion": table("vascular_invasion", (0.6, "Present"), (0.0, "Absent")),
    },
)

PANCREATIC = DiagnosticDomain(
    name="pancreatic",
    math_algorithms=stage(
        ("ductal_mucinous_classification", 36.0, "architecture"),
        ("who_grade", 30.0, "nuclear"),
        ("desmoplastic_reaction", 24.0, "differentiation"),
        ("perineural_invasion", 10.0, "cellularity"),
    ),
    ai_algorithms=stage(
        ("pancreatic_cnn_profile", 70.0, "intensity"),
        ("neural_invasion_edges", 30.0, "edges"),
    ),
    math_weight=0.9,
    ai_weight=0.1,
    confidence_ceiling=0.947,
    category_table=table(
        "category",
        (0.7, "Pancreatic adenocarcinoma"),
        (0.4, "Dysplastic changes"),
        (0.0, "Benign"),
    ),
    secondary_tables={
        "histotype": table(
            "histotype",
            (0.8, "Ductal Adenocarcinoma"),
            (0.6, "Mucinous Adenocarcinoma"),
            (0.4, "Mixed Adenocarcinoma"),
            (0.0, "Undetermined"),
        ),
        "who_grade": table(
            "who_grade",
            (0.85, "Grade 3 (Poorly Differentiated)"),
            (0.65, "Grade 2 (Moderately Differentiated)"),
            (0.45, "Grade 1 (Well Differentiated)"),
            (0.0, "Undetermined"),
        ),
        "desmoplastic_reaction": table(
            "desmoplastic_reaction",
            (0.7, "Extensive"),
            (0.4, "Moderate"),
            (0.0, "Minimal"),
        ),
        "perineural_invasion": table(
            "perineural_invasion",
            (0.6, "Present (Pancreatic Cancer Hallmark)"),
            (0.0, "Absent"),
        ),
    },
)

GALLBLADDER = DiagnosticDomain(
    name="gallbladder",
    math_algorithms=stage(
        ("wall_invasion_depth", 35.0, "cellularity"),
        ("biliary_histotype", 25.0, "architecture"),
        ("perineural_invasion", 15.0, "nuclear"),
        share=75.0,
    ),
    ai_algorithms=stage(
        ("hpb_integration", 60.0, "intensity"),
        ("who_classification", 40.0, "edges"),
    ),
    math_weight=0.75,
    ai_weight=0.25,
    confidence_ceiling=0.99,
    category_table=table(
        "category",
        (0.5, "Gallbladder carcinoma"),
        (0.0, "Chronic cholecystitis"),
    ),
)

DOMAINS = (COLON, GASTRIC, ESOPHAGEAL, LIVER, PANCREATIC, GALLBLADDER)
