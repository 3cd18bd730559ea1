"""
Atlas Settings: store de settings em camadas.

Este pacote resolve o valor efetivo de cada setting a partir de uma pilha
ordenada de layers:

    local (opcional) → shared (opcional) → default (embarcado, sempre presente)

Arquitetura em alto nível:
    - core.values    → tipos de valor suportados e conversores tipados
    - core.layer     → layer (mapa chave → valor, com caminho opcional)
    - core.codec     → persistência YAML tolerante a corrupção
    - core.bootstrap → descoberta e criação dos layers opcionais
    - core.store     → fachada de leitura, escrita, save e notificação
    - core.lifecycle → criação e remoção de layers em tempo de execução
    - accessors      → acessores tipados por chave explícita

Limites explícitos:
    - Não valida semântica dos valores
    - Não coordena múltiplos processos
    - Não recarrega documentos após a carga inicial
"""

import logging

from .core import (
    ChangeNotifier,
    KeyUndefinedError,
    LayerLifecycleManager,
    SettingsError,
    SettingsLocations,
    SettingsStore,
    resolve_locations,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChangeNotifier",
    "KeyUndefinedError",
    "LayerLifecycleManager",
    "SettingsError",
    "SettingsLocations",
    "SettingsStore",
    "resolve_locations",
]
