"""Exception types raised by the histoscore pipeline."""

from __future__ import annotations


class HistoscoreError(Exception):
    """Base class for histoscore errors."""


class InputValidationError(HistoscoreError, ValueError):
    """Raised when an input image is malformed.

    Covers non-positive or below-minimum dimensions and pixel buffers whose
    length does not match ``width * height * 4``. Raised before any stage
    of the pipeline runs; no partial result is produced.
    """
