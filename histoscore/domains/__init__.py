"""Diagnostic domain configurations.

A domain is data: the algorithm tables for both ensemble stages, the
integration weights and the threshold tables. The pipeline itself is the
same for every domain. Domains are grouped by organ system.
"""

from __future__ import annotations

from histoscore.domains import (
    digestive,
    genitourinary,
    gynecologic,
    head_neck,
    hematolymphoid,
    mesenchymal,
    neuroendocrine,
    skin,
    thoracic,
)
from histoscore.domains.base import DiagnosticDomain

_DOMAINS: dict[str, DiagnosticDomain] = {
    domain.name: domain
    for module in (
        thoracic,
        gynecologic,
        genitourinary,
        digestive,
        hematolymphoid,
        head_neck,
        mesenchymal,
        neuroendocrine,
        skin,
    )
    for domain in module.DOMAINS
}


def available_domains() -> tuple[str, ...]:
    """Return the names of the shipped domains."""

    return tuple(sorted(_DOMAINS))


def get_domain(name: str) -> DiagnosticDomain:
    """Look up a domain by name.

    Args:
        name: Domain name (case-insensitive).

    Returns:
        DiagnosticDomain instance.

    Raises:
        KeyError: If the domain is unknown.
    """

    try:
        return _DOMAINS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown domain {name!r}; available: {', '.join(available_domains())}") from None


__all__ = ["DiagnosticDomain", "available_domains", "get_domain"]
