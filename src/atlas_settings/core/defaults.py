# src/atlas_settings/core/defaults.py
"""
Layer default embarcado.

O layer default é lido de `atlas_settings/data/defaults.yaml`, distribuído
junto com o pacote, e define:
    - os valores base de cada setting
    - o conjunto completo de chaves reconhecidas pelo store

Diferente dos layers opcionais, um documento default inválido não é
tolerado: é erro de empacotamento e a exceção é propagada.
"""

from __future__ import annotations

from importlib import resources
from typing import Any, Mapping, Optional

from .codec import parse_document
from .layer import Layer, default_layer


DEFAULTS_PACKAGE = "atlas_settings.data"
DEFAULTS_RESOURCE = "defaults.yaml"


def read_bundled_defaults(
    package: str = DEFAULTS_PACKAGE,
    resource: str = DEFAULTS_RESOURCE,
) -> dict:
    """
    Lê as entradas default embarcadas no pacote.

    Raises:
        FileNotFoundError: Se o recurso não existir no pacote.
        InvalidSettingsDocumentError: Se o documento embarcado for inválido.
    """
    text = resources.files(package).joinpath(resource).read_text(encoding="utf-8")
    return parse_document(text)


def load_default_layer(entries: Optional[Mapping[str, Any]] = None) -> Layer:
    """
    Constrói o layer default.

    Args:
        entries: Entradas explícitas (ex.: testes ou aplicações que embarcam
            seus próprios defaults). Quando None, usa o recurso do pacote.

    Returns:
        Layer: Layer default somente leitura.
    """
    if entries is None:
        entries = read_bundled_defaults()
    return default_layer(entries)


__all__ = ["read_bundled_defaults", "load_default_layer"]
