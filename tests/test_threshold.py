"""Tests for threshold tables and the classifier."""

from __future__ import annotations

import numpy as np
import pytest

from histoscore.classifier import ThresholdClassifier, ThresholdTable
from histoscore.domains import available_domains, get_domain

DENSE_SCORES = np.linspace(0.0, 1.0, 10_001)


def all_domain_tables() -> list[ThresholdTable]:
    tables = []
    for name in available_domains():
        domain = get_domain(name)
        tables.append(domain.category_table)
        tables.extend(domain.secondary_tables.values())
    return tables


class TestThresholdTable:
    """Table invariants and lookup semantics."""

    @pytest.fixture
    def grade_table(self) -> ThresholdTable:
        return ThresholdTable.from_pairs("grade", [(0.66, "G3"), (0.31, "G2"), (0.0, "G1")])

    def test_score_meeting_a_bound_takes_that_bracket(self, grade_table):
        assert grade_table.classify(0.66) == "G3"
        assert grade_table.classify(0.6599) == "G2"
        assert grade_table.classify(0.31) == "G2"
        assert grade_table.classify(0.0) == "G1"
        assert grade_table.classify(1.0) == "G3"

    def test_out_of_range_scores_are_clamped(self, grade_table):
        assert grade_table.classify(-3.0) == "G1"
        assert grade_table.classify(7.0) == "G3"
        assert grade_table.classify(float("nan")) == "G1"

    def test_bracket_for(self, grade_table):
        assert grade_table.bracket_for(0.5) == (0.31, "G2")
        assert grade_table.labels == ("G3", "G2", "G1")

    @pytest.mark.parametrize(
        "pairs",
        [
            [],
            [(0.5, "high"), (0.5, "mid"), (0.0, "low")],
            [(0.3, "low"), (0.6, "high"), (0.0, "none")],
            [(0.7, "high"), (0.2, "low")],
            [(1.2, "over"), (0.0, "low")],
            [(0.5, ""), (0.0, "low")],
        ],
    )
    def test_invalid_tables_are_rejected(self, pairs):
        with pytest.raises(ValueError):
            ThresholdTable.from_pairs("bad", pairs)

    @pytest.mark.parametrize("table", all_domain_tables(), ids=lambda table: table.name)
    def test_every_score_matches_exactly_one_bracket(self, table):
        bounds = [bound for bound, _ in table.brackets]
        uppers = [float("inf")] + bounds[:-1]

        for score in DENSE_SCORES:
            matches = [
                label
                for (lower, label), upper in zip(table.brackets, uppers)
                if lower <= score < upper
            ]
            assert len(matches) == 1
            assert table.classify(score) == matches[0]


class TestThresholdClassifier:
    """Category plus secondary tables sharing one mechanism."""

    def test_classify_all_tables(self):
        classifier = ThresholdClassifier(
            ThresholdTable.from_pairs("category", [(0.5, "malignant"), (0.0, "benign")]),
            {
                "grade": ThresholdTable.from_pairs("grade", [(0.8, "high"), (0.0, "low")]),
                "stage": ThresholdTable.from_pairs("stage", [(0.4, "advanced"), (0.0, "early")]),
            },
        )

        category, secondary = classifier.classify(0.6)

        assert category == "malignant"
        assert secondary == {"grade": "low", "stage": "advanced"}

    def test_without_secondary_tables(self):
        classifier = ThresholdClassifier(ThresholdTable.from_pairs("category", [(0.0, "only")]))

        assert classifier.classify(0.9) == ("only", {})
