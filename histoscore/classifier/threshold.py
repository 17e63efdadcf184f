"""Threshold tables mapping continuous scores onto ordered labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from histoscore.ensemble.algorithm import clamp_unit


@dataclass(frozen=True)
class ThresholdTable:
    """Ordered ``(lower_bound, label)`` brackets.

    Bounds are strictly decreasing and the last bound is 0, so every score in
    [0, 1] falls in exactly one half-open bracket ``[bound_i, bound_{i-1})``.

    Attributes:
        name: Table name (e.g. ``category``, ``grade``).
        brackets: Brackets sorted by descending lower bound.
    """

    name: str
    brackets: tuple[tuple[float, str], ...]

    def __post_init__(self) -> None:
        brackets = tuple((float(bound), str(label)) for bound, label in self.brackets)
        object.__setattr__(self, "brackets", brackets)

        if not brackets:
            raise ValueError(f"Threshold table {self.name!r} cannot be empty.")
        bounds = [bound for bound, _ in brackets]
        if any(not 0.0 <= bound <= 1.0 for bound in bounds):
            raise ValueError(f"Bounds in {self.name!r} must lie in [0, 1]: {bounds}")
        if any(later >= earlier for earlier, later in zip(bounds, bounds[1:])):
            raise ValueError(f"Bounds in {self.name!r} must be strictly decreasing: {bounds}")
        if bounds[-1] != 0.0:
            raise ValueError(f"Lowest bound in {self.name!r} must be 0, got {bounds[-1]}.")
        if any(not label for _, label in brackets):
            raise ValueError(f"Labels in {self.name!r} cannot be empty.")

    @classmethod
    def from_pairs(cls, name: str, pairs: Iterable[tuple[float, str]]) -> "ThresholdTable":
        return cls(name=name, brackets=tuple(pairs))

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for _, label in self.brackets)

    def bracket_for(self, score: float) -> tuple[float, str]:
        """Return the bracket whose lower bound the score first meets or exceeds."""

        score = clamp_unit(score)
        for bound, label in self.brackets:
            if score >= bound:
                return bound, label
        # Unreachable: the last bound is 0.
        raise AssertionError(f"No bracket in {self.name!r} matched score {score}.")

    def classify(self, score: float) -> str:
        """Return the label for a score."""

        return self.bracket_for(score)[1]


@dataclass(frozen=True)
class ThresholdClassifier:
    """Classify one score against a category table and secondary tables.

    Attributes:
        category_table: Table producing the primary diagnostic category.
        secondary_tables: Additional tables (grade, stage, subtype...) keyed by name.
    """

    category_table: ThresholdTable
    secondary_tables: Mapping[str, ThresholdTable] = field(default_factory=dict)

    def classify(self, score: float) -> tuple[str, dict[str, str]]:
        """Return the category label and the secondary labels for a score."""

        category = self.category_table.classify(score)
        secondary = {name: table.classify(score) for name, table in self.secondary_tables.items()}
        return category, secondary
