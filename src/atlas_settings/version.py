# src/atlas_settings/version.py
"""
Versão da aplicação em formato pontuado.

Formato: `major.minor[.build][.revision]`; build e revision são anexados
apenas quando maiores que zero (ex.: 2.14, 2.14.1, 2.14.0.3 → "2.14.0.3").

Este módulo lê metadados de build e não interage com o store de settings.
"""

from __future__ import annotations

from importlib import metadata
from typing import Tuple


DISTRIBUTION = "atlas-settings"


def format_version(major: int, minor: int, build: int = 0, revision: int = 0) -> str:
    result = f"{major}.{minor}"

    if build > 0 or revision > 0:
        result += f".{max(build, 0)}"

    if revision > 0:
        result += f".{revision}"

    return result


def parse_version_parts(text: str) -> Tuple[int, int, int, int]:
    """Extrai até quatro componentes numéricos de uma string de versão."""
    parts = []
    for raw in text.split(".")[:4]:
        digits = ""
        for ch in raw:
            if not ch.isdigit():
                break
            digits += ch
        parts.append(int(digits) if digits else 0)
    while len(parts) < 4:
        parts.append(0)
    return parts[0], parts[1], parts[2], parts[3]


def get_version(distribution: str = DISTRIBUTION) -> str:
    """
    Versão instalada da distribuição, formatada por `format_version`.

    Raises:
        importlib.metadata.PackageNotFoundError: Se a distribuição não estiver instalada.
    """
    return format_version(*parse_version_parts(metadata.version(distribution)))


__all__ = ["format_version", "parse_version_parts", "get_version"]
