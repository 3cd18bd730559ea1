# src/atlas_settings/core/lifecycle.py
"""
Gerenciamento em tempo de execução dos layers opcionais.

Operações:
    - create_local / create_shared: cria o documento se ausente, carrega-o
      (ou inicializa vazio) e ativa o layer no store
    - remove_local / remove_shared: apaga o documento se presente e
      desativa o layer no store

Criar um layer não copia para ele valores dos outros layers: chaves
ausentes continuam resolvidas pelos layers de menor precedência.

Remover um layer não limpa a live view do store (limitação conhecida).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .codec import create_empty_document, load_layer
from .layer import LOCAL, SHARED, Layer
from .locations import SettingsLocations
from .store import SettingsStore


logger = logging.getLogger(__name__)


class LayerLifecycleManager:
    """Cria e remove os layers opcionais de um `SettingsStore`."""

    def __init__(self, store: SettingsStore, locations: Optional[SettingsLocations] = None):
        locations = locations if locations is not None else store.locations
        if locations is None:
            raise ValueError("LayerLifecycleManager requer SettingsLocations")
        self.store = store
        self.locations = locations

    def create_local(self) -> Layer:
        """Ativa o layer local (maior precedência)."""
        return self._create(LOCAL, self.locations.local_path, self.store.local_layer)

    def create_shared(self) -> Layer:
        """Ativa o layer shared."""
        return self._create(SHARED, self.locations.shared_path, self.store.shared_layer)

    def remove_local(self) -> Optional[Layer]:
        """Apaga o documento local e desativa o layer; devolve o layer removido."""
        return self._remove(LOCAL, self.locations.local_path)

    def remove_shared(self) -> Optional[Layer]:
        """Apaga o documento shared e desativa o layer; devolve o layer removido."""
        return self._remove(SHARED, self.locations.shared_path)

    def _create(self, name: str, path: Path, current: Optional[Layer]) -> Layer:
        # já ativo: nada a recarregar
        if current is not None:
            return current

        if not path.exists():
            create_empty_document(path)
            logger.info("Documento %s criado em %s", name, path)

        layer = load_layer(path, name=name)
        self.store.register_layer(layer)
        return layer

    def _remove(self, name: str, path: Path) -> Optional[Layer]:
        if path.exists():
            path.unlink()
            logger.info("Documento %s removido: %s", name, path)
        return self.store.unregister_layer(name)


__all__ = ["LayerLifecycleManager"]
