"""Core package for the histoscore H&E analysis pipeline.

Keep imports lightweight; the pipeline and domain tables pull in numpy and
scikit-image, so they are exposed lazily.
"""

from __future__ import annotations

from histoscore.errors import HistoscoreError, InputValidationError
from histoscore.image import Image

__all__ = [
	"DiagnosticPipeline",
	"DiagnosticResult",
	"HistoscoreError",
	"Image",
	"InputValidationError",
	"get_domain",
]


def __getattr__(name: str):
	if name in ("DiagnosticPipeline", "DiagnosticResult"):
		from histoscore import pipeline  # local import (lazy)

		return getattr(pipeline, name)
	if name == "get_domain":
		from histoscore.domains import get_domain  # local import (lazy)

		return get_domain
	raise AttributeError(name)
