# src/atlas_settings/core/bootstrap.py
"""
Bootstrapper dos layers opcionais.

Estabelece a pilha inicial de layers uma única vez por processo:

    1. garante o diretório do layer shared (idempotente)
    2. se nenhum documento existir, cria um documento shared vazio
       (o local nunca é criado automaticamente)
    3. carrega cada documento existente, na ordem de precedência:
       local primeiro, shared depois

Falhas ao criar diretórios ou o documento vazio são fatais e propagadas
(`OSError`): o store não é construído nesse caso.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .codec import create_empty_document, load_layer
from .layer import LOCAL, SHARED, Layer
from .locations import SettingsLocations


logger = logging.getLogger(__name__)


@dataclass
class OptionalLayers:
    """Layers opcionais resultantes do bootstrap (None quando ausentes)."""

    local: Optional[Layer] = None
    shared: Optional[Layer] = None

    def in_precedence_order(self) -> List[Layer]:
        return [layer for layer in (self.local, self.shared) if layer is not None]


def bootstrap_layers(locations: SettingsLocations) -> OptionalLayers:
    """
    Descobre, cria (se necessário) e carrega os layers opcionais.

    Args:
        locations (SettingsLocations): Caminhos dos documentos local e shared.

    Returns:
        OptionalLayers: Layers opcionais ativos.

    Raises:
        OSError: Se o diretório shared ou o documento vazio não puderem ser criados.
    """
    local_path = locations.local_path
    shared_path = locations.shared_path

    shared_path.parent.mkdir(parents=True, exist_ok=True)

    if not local_path.exists() and not shared_path.exists():
        create_empty_document(shared_path)
        logger.info("Nenhum documento de settings encontrado; shared vazio criado em %s", shared_path)

    result = OptionalLayers()

    if local_path.exists():
        result.local = load_layer(local_path, name=LOCAL)

    if shared_path.exists():
        result.shared = load_layer(shared_path, name=SHARED)

    logger.debug(
        "Layers opcionais ativos: %s",
        [(layer.name, str(layer.backing_path), len(layer)) for layer in result.in_precedence_order()],
    )
    return result


__all__ = ["OptionalLayers", "bootstrap_layers"]
