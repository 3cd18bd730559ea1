# src/atlas_settings/core/store.py
"""
SettingsStore: fachada de resolução de settings.

O store coordena:
    - o layer default (sempre presente, imutável, último na precedência)
    - os layers opcionais ativos: local (maior precedência) e shared
    - a live view: mapa mesclado usado para leitura e como alvo de escrita
    - o canal de notificação de mudanças

Política de leitura (`get`):
    1. valor da live view, se a chave estiver presente
    2. valor do layer default
    3. `fallback`, se informado
    4. caso contrário `KeyUndefinedError`

Política de escrita (`set`):
    - insere/atualiza a chave em **todos** os layers opcionais ativos
    - insere/atualiza a chave na live view
    - notifica os observers com o nome da chave
    - nenhum tipo é validado

Política de persistência (`save`):
    - grava exatamente um documento: o local se ativo, senão o shared
    - sem layers opcionais ativos, `save` não faz nada

Invariantes:
    - A live view contém todas as chaves do layer default
    - Layers opcionais ativos permanecem mutuamente consistentes após `set`

Limitação conhecida (reproduzida): remover um layer opcional não remove da
live view os valores que vieram dele; eles persistem até serem
sobrescritos ou até o processo reiniciar.

Não há singleton global: a aplicação constrói o store explicitamente
(normalmente via `SettingsStore.bootstrap`) e o injeta onde for necessário.
O store não é thread-safe.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .bootstrap import bootstrap_layers
from .codec import save_layer
from .defaults import load_default_layer
from .errors import KeyUndefinedError
from .layer import LOCAL, SHARED, Layer
from .locations import (
    DEFAULT_APP_NAME,
    DEFAULT_FILENAME,
    SettingsLocations,
    resolve_locations,
)
from .notifications import ChangeNotifier, Observer
from .values import SettingValue


logger = logging.getLogger(__name__)

_MISSING: Any = object()


class SettingsStore:
    """Fachada de resolução, escrita, persistência e notificação de settings."""

    def __init__(
        self,
        *,
        default: Layer,
        local: Optional[Layer] = None,
        shared: Optional[Layer] = None,
        notifier: Optional[ChangeNotifier] = None,
        locations: Optional[SettingsLocations] = None,
    ):
        if default is None or not default.read_only:
            raise ValueError("SettingsStore requer um layer default somente leitura")

        self._default = default
        self._local = local
        self._shared = shared
        self._notifier = notifier if notifier is not None else ChangeNotifier()
        self.locations = locations

        self._live: Dict[str, Any] = {}
        for layer in reversed(self.active_layers):
            self._live.update(layer.view())

    # ------------------------------------------------------------------
    # Construção
    # ------------------------------------------------------------------
    @classmethod
    def bootstrap(
        cls,
        locations: Optional[SettingsLocations] = None,
        *,
        defaults: Optional[Mapping[str, Any]] = None,
        app_name: str = DEFAULT_APP_NAME,
        filename: str = DEFAULT_FILENAME,
    ) -> "SettingsStore":
        """
        Ponto único de inicialização do store.

        Args:
            locations: Caminhos dos documentos; por padrão resolvidos via
                `resolve_locations(app_name=..., filename=...)`.
            defaults: Entradas do layer default; por padrão o recurso embarcado.
            app_name: Nome da aplicação para o diretório shared.
            filename: Nome do documento de settings.

        Returns:
            SettingsStore: Store com a pilha de layers estabelecida.

        Raises:
            OSError: Se o diretório ou documento shared não puderem ser criados.
        """
        if locations is None:
            locations = resolve_locations(app_name=app_name, filename=filename)

        default = load_default_layer(defaults)
        optional = bootstrap_layers(locations)

        store = cls(
            default=default,
            local=optional.local,
            shared=optional.shared,
            locations=locations,
        )
        logger.info(
            "SettingsStore inicializado: layers=%s, chaves=%d",
            [layer.name for layer in store.active_layers],
            len(store._live),
        )
        return store

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------
    @property
    def default_layer(self) -> Layer:
        return self._default

    @property
    def local_layer(self) -> Optional[Layer]:
        return self._local

    @property
    def shared_layer(self) -> Optional[Layer]:
        return self._shared

    @property
    def optional_layers(self) -> List[Layer]:
        """Layers opcionais ativos, maior precedência primeiro."""
        return [layer for layer in (self._local, self._shared) if layer is not None]

    @property
    def active_layers(self) -> List[Layer]:
        """Todos os layers ativos, maior precedência primeiro (default por último)."""
        return self.optional_layers + [self._default]

    @property
    def live_view(self) -> Mapping[str, Any]:
        return MappingProxyType(self._live)

    def register_layer(self, layer: Layer) -> None:
        """
        Ativa um layer opcional (usado pelo `LayerLifecycleManager`).

        As entradas do layer são sobrepostas na live view, exceto chaves já
        definidas por um layer ativo de maior precedência. Nenhum valor de
        outros layers é copiado para o layer registrado.
        """
        if layer.name == LOCAL:
            self._local = layer
            higher: List[Layer] = []
        elif layer.name == SHARED:
            self._shared = layer
            higher = [self._local] if self._local is not None else []
        else:
            raise ValueError(f"Apenas layers opcionais podem ser registrados: {layer.name!r}")

        for key, value in layer.view().items():
            if not any(key in h for h in higher):
                self._live[key] = value

        logger.info("Layer %s ativado (%s)", layer.name, layer.backing_path)

    def unregister_layer(self, name: str) -> Optional[Layer]:
        """
        Desativa um layer opcional e devolve a referência removida.

        A live view não é alterada (limitação conhecida).
        """
        if name == LOCAL:
            removed, self._local = self._local, None
        elif name == SHARED:
            removed, self._shared = self._shared, None
        else:
            raise ValueError(f"Apenas layers opcionais podem ser removidos: {name!r}")

        if removed is not None:
            logger.info("Layer %s desativado", name)
        return removed

    # ------------------------------------------------------------------
    # Get / Set
    # ------------------------------------------------------------------
    def get(self, key: str, fallback: Any = _MISSING) -> Any:
        """
        Retorna o valor efetivo de `key`.

        Raises:
            KeyUndefinedError: Se nem a live view nem o layer default definem
                `key` e nenhum `fallback` foi informado.
        """
        if key in self._live:
            value = self._live[key]
        elif key in self._default:
            value = self._default.get(key)
        elif fallback is not _MISSING:
            return fallback
        else:
            raise KeyUndefinedError(key)

        if value is None and fallback is not _MISSING:
            return fallback
        return value

    def set(self, key: str, value: SettingValue) -> None:
        """Grava `key` em todos os layers opcionais ativos e na live view, e notifica."""
        for layer in self.optional_layers:
            layer.set(key, value)

        self._live[key] = value
        logger.debug(
            "Setting %s atualizado (layers=%d, observers=%d)",
            key,
            len(self.optional_layers),
            len(self._notifier),
        )

        self._notifier.notify(key)

    def __contains__(self, key: object) -> bool:
        return key in self._live or key in self._default

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> List[str]:
        keys = list(self._live)
        keys.extend(k for k in self._default if k not in self._live)
        return keys

    # ------------------------------------------------------------------
    # Persistência
    # ------------------------------------------------------------------
    def save_target(self) -> Optional[Layer]:
        """Layer que `save` gravaria: local se ativo, senão shared, senão None."""
        if self._local is not None:
            return self._local
        return self._shared

    def save(self) -> Optional[Path]:
        """
        Persiste o layer alvo.

        Returns:
            Optional[Path]: Caminho gravado, ou None quando não há layer opcional ativo.

        Raises:
            OSError: Em falhas de escrita (propagado sem retry).
        """
        target = self.save_target()
        if target is None:
            logger.debug("Nenhum layer opcional ativo; save ignorado")
            return None
        return save_layer(target)

    # ------------------------------------------------------------------
    # Notificações
    # ------------------------------------------------------------------
    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    def subscribe(self, observer: Observer) -> Observer:
        return self._notifier.subscribe(observer)

    def unsubscribe(self, observer: Observer) -> bool:
        return self._notifier.unsubscribe(observer)


__all__ = ["SettingsStore"]
