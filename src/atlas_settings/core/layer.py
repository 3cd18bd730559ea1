# src/atlas_settings/core/layer.py
"""
Layer: um mapa chave → valor, opcionalmente associado a um arquivo.

Nomes canônicos de layer:
    - "local":   arquivo ao lado do programa em execução (maior precedência)
    - "shared":  arquivo no diretório de dados do usuário
    - "default": layer embarcado no pacote, imutável e nunca persistido

Invariantes:
    - Chaves são strings únicas dentro do layer
    - A ordem de inserção das entradas é preservada
    - O layer default não aceita escrita, nem via `set` nem via `entries`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, MutableMapping, Optional

from .errors import ImmutableLayerError
from .values import SettingValue


LOCAL = "local"
SHARED = "shared"
DEFAULT = "default"


@dataclass
class Layer:
    """
    Layer de settings.

    Campos:
    - name: nome canônico do layer (local, shared, default)
    - entries: mapa ordenado chave → valor; no layer default é um
      `MappingProxyType` somente leitura
    - backing_path: arquivo de persistência; None para o layer default
      e para layers ainda não materializados
    - read_only: True apenas para o layer default
    """

    name: str
    entries: MutableMapping[str, Any] = field(default_factory=dict)
    backing_path: Optional[Path] = None
    read_only: bool = False

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        return self.entries.get(key, default)

    def set(self, key: str, value: SettingValue) -> None:
        """Insere ou atualiza `key`."""
        if self.read_only:
            raise ImmutableLayerError(f"Layer {self.name!r} é somente leitura")
        self.entries[key] = value

    def view(self) -> Mapping[str, Any]:
        """Visão somente leitura das entradas."""
        return MappingProxyType(self.entries)


def default_layer(entries: Mapping[str, Any]) -> Layer:
    """Cria o layer default (cópia rasa das entradas, exposta somente leitura)."""
    return Layer(
        name=DEFAULT,
        entries=MappingProxyType(dict(entries)),
        backing_path=None,
        read_only=True,
    )


__all__ = ["Layer", "default_layer", "LOCAL", "SHARED", "DEFAULT"]
