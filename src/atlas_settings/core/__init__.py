"""
Core do Atlas Settings.

Componentes (das folhas para a fachada):
    - values        → Color, Rect, FontSpec, EnumConstant e conversores `as_*`
    - layer         → Layer e layer default somente leitura
    - codec         → load/save de layers em YAML
    - defaults      → layer default embarcado no pacote
    - locations     → caminhos dos documentos local e shared
    - bootstrap     → pilha inicial de layers opcionais
    - notifications → canal síncrono de mudanças
    - store         → SettingsStore (fachada)
    - lifecycle     → criação/remoção de layers em tempo de execução

Modelo de execução: single-thread, I/O síncrono, sem locks internos.
"""

from .errors import (
    ImmutableLayerError,
    InvalidSettingsDocumentError,
    KeyUndefinedError,
    SettingsError,
    ValueKindError,
)
from .layer import DEFAULT, LOCAL, SHARED, Layer
from .codec import dump_document, load_layer, parse_document, save_layer
from .defaults import load_default_layer
from .locations import SettingsLocations, resolve_locations
from .bootstrap import OptionalLayers, bootstrap_layers
from .notifications import ChangeNotifier
from .store import SettingsStore
from .lifecycle import LayerLifecycleManager

__all__ = [
    "SettingsError",
    "KeyUndefinedError",
    "ValueKindError",
    "InvalidSettingsDocumentError",
    "ImmutableLayerError",
    "Layer",
    "LOCAL",
    "SHARED",
    "DEFAULT",
    "dump_document",
    "parse_document",
    "load_layer",
    "save_layer",
    "load_default_layer",
    "SettingsLocations",
    "resolve_locations",
    "OptionalLayers",
    "bootstrap_layers",
    "ChangeNotifier",
    "SettingsStore",
    "LayerLifecycleManager",
]
