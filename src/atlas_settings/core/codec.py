# src/atlas_settings/core/codec.py
"""
Codec de persistência de layers em YAML.

Formato do documento (v1):
    - raiz: mapa chave → valor
    - escalares nativos do YAML para bool, int, float e str
    - tags locais para os tipos ricos:

        ClickColor: !color '#FFFF0000'
        GridSize: !rect [0.0, 0.0, 20.0, 20.0]
        CaptionFont: !font {family: Segoe UI, size: 14.0, style: Normal, weight: Bold}
        StopShortcut: !enum 'Key.F8'

Política de carregamento:
    - Arquivo vazio → layer vazio
    - Qualquer falha (arquivo ilegível, texto não UTF-8, YAML malformado ou
      aninhado além do limite de recursão, raiz não-dict, tag desconhecida,
      valor tagueado inválido) → layer vazio + warning no log
    - O documento corrompido é copiado para `<arquivo>.bak.<timestamp>`
      antes de ser sobrescrito por um save futuro

Política de escrita:
    - Chaves ordenadas, estilo bloco, indentação de 2 espaços
    - A mesma entrada sempre produz exatamente os mesmos bytes
    - Escrita atômica (arquivo temporário + rename)
    - Falhas de I/O são propagadas ao chamador
"""

from __future__ import annotations

import logging
import os
import time
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml  # PyYAML
from yaml.constructor import ConstructorError

from .errors import ImmutableLayerError, InvalidSettingsDocumentError
from .layer import Layer
from .values import Color, EnumConstant, FontSpec, Rect


logger = logging.getLogger(__name__)

COLOR_TAG = "!color"
RECT_TAG = "!rect"
FONT_TAG = "!font"
ENUM_TAG = "!enum"


class _SettingsDumper(yaml.SafeDumper):
    """SafeDumper com representers para os tipos ricos de settings."""


class _SettingsLoader(yaml.SafeLoader):
    """SafeLoader com constructors para os tipos ricos de settings."""


# ---------------------------------------------------------------------------
# Representers
# ---------------------------------------------------------------------------

def _represent_color(dumper: yaml.SafeDumper, value: Color) -> yaml.ScalarNode:
    return dumper.represent_scalar(COLOR_TAG, value.to_hex())


def _represent_rect(dumper: yaml.SafeDumper, value: Rect) -> yaml.SequenceNode:
    return dumper.represent_sequence(RECT_TAG, value.to_list(), flow_style=True)


def _represent_font(dumper: yaml.SafeDumper, value: FontSpec) -> yaml.MappingNode:
    return dumper.represent_mapping(FONT_TAG, value.to_dict(), flow_style=True)


def _represent_enum_constant(dumper: yaml.SafeDumper, value: EnumConstant) -> yaml.ScalarNode:
    return dumper.represent_scalar(ENUM_TAG, str(value))


def _represent_enum_member(dumper: yaml.SafeDumper, value: Enum) -> yaml.ScalarNode:
    # Membros de Enum concretos são gravados como constantes e voltam como EnumConstant
    return _represent_enum_constant(dumper, EnumConstant.of(value))


_SettingsDumper.add_representer(Color, _represent_color)
_SettingsDumper.add_representer(Rect, _represent_rect)
_SettingsDumper.add_representer(FontSpec, _represent_font)
_SettingsDumper.add_representer(EnumConstant, _represent_enum_constant)
_SettingsDumper.add_multi_representer(Enum, _represent_enum_member)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def _construct_color(loader: yaml.SafeLoader, node: yaml.Node) -> Color:
    return Color.parse(loader.construct_scalar(node))


def _construct_rect(loader: yaml.SafeLoader, node: yaml.Node) -> Rect:
    if not isinstance(node, yaml.SequenceNode):
        raise ConstructorError(
            None, None, f"{RECT_TAG} requer uma sequência", node.start_mark
        )
    return Rect.from_sequence(loader.construct_sequence(node, deep=True))


def _construct_font(loader: yaml.SafeLoader, node: yaml.Node) -> FontSpec:
    if not isinstance(node, yaml.MappingNode):
        raise ConstructorError(
            None, None, f"{FONT_TAG} requer um mapa", node.start_mark
        )
    return FontSpec.from_dict(loader.construct_mapping(node, deep=True))


def _construct_enum(loader: yaml.SafeLoader, node: yaml.Node) -> EnumConstant:
    return EnumConstant.parse(loader.construct_scalar(node))


_SettingsLoader.add_constructor(COLOR_TAG, _construct_color)
_SettingsLoader.add_constructor(RECT_TAG, _construct_rect)
_SettingsLoader.add_constructor(FONT_TAG, _construct_font)
_SettingsLoader.add_constructor(ENUM_TAG, _construct_enum)


# ---------------------------------------------------------------------------
# Codec de texto
# ---------------------------------------------------------------------------

def parse_document(text: str) -> Dict[str, Any]:
    """
    Interpreta o texto de um documento de settings.

    Args:
        text (str): Conteúdo YAML.

    Returns:
        Dict[str, Any]: Entradas do documento (vazio para documento vazio).

    Raises:
        InvalidSettingsDocumentError: Se o documento não puder ser interpretado.
    """
    try:
        data = yaml.load(text, Loader=_SettingsLoader)
    except (yaml.YAMLError, ValueError, TypeError, RecursionError) as e:
        raise InvalidSettingsDocumentError(f"Documento de settings inválido: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise InvalidSettingsDocumentError(
            f"Raiz do documento deve ser dict, recebido: {type(data).__name__}"
        )

    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise InvalidSettingsDocumentError(f"Chaves não textuais no documento: {bad_keys!r}")

    return data


def dump_document(entries: Mapping[str, Any]) -> str:
    """Serializa as entradas em YAML determinístico e indentado."""
    return yaml.dump(
        dict(entries),
        Dumper=_SettingsDumper,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
        indent=2,
    )


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------

def _backup_corrupt(path: Path) -> Optional[Path]:
    ts = time.strftime("%Y%m%d_%H%M%S")
    bak = path.with_name(f"{path.name}.bak.{ts}")
    try:
        bak.write_bytes(path.read_bytes())
    except OSError as e:
        logger.debug("Não foi possível criar backup de %s: %s", path, e)
        return None
    return bak


def load_layer(path: Path, *, name: str) -> Layer:
    """
    Carrega um layer a partir de um documento em disco.

    Nunca levanta exceção por conteúdo: documento ausente, ilegível ou
    corrompido resulta em layer vazio associado a `path`.

    Args:
        path (Path): Caminho do documento.
        name (str): Nome canônico do layer (local, shared).

    Returns:
        Layer: Layer carregado (possivelmente vazio).
    """
    path = Path(path)
    entries: Dict[str, Any] = {}

    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug("Documento de settings ausente, layer %s vazio: %s", name, path)
    except OSError as e:
        logger.warning("Documento de settings ilegível (%s), layer %s vazio: %s", path, name, e)
    else:
        try:
            entries = parse_document(raw.decode("utf-8"))
        except (UnicodeDecodeError, InvalidSettingsDocumentError) as e:
            bak = _backup_corrupt(path)
            logger.warning(
                "Documento de settings corrompido (%s), layer %s vazio (backup: %s): %s",
                path,
                name,
                bak,
                e,
            )

    return Layer(name=name, entries=entries, backing_path=path)


def save_layer(layer: Layer, path: Optional[Path] = None) -> Path:
    """
    Persiste todas as entradas do layer no documento YAML.

    Args:
        layer (Layer): Layer a persistir.
        path (Optional[Path]): Destino; por padrão `layer.backing_path`.

    Returns:
        Path: Caminho efetivamente gravado.

    Raises:
        ImmutableLayerError: Se o layer for o default.
        ValueError: Se não houver destino.
        OSError: Em falhas de escrita (propagado sem retry).
    """
    if layer.read_only:
        raise ImmutableLayerError(f"Layer {layer.name!r} não é persistível")

    target = Path(path) if path is not None else layer.backing_path
    if target is None:
        raise ValueError(f"Layer {layer.name!r} não possui caminho de persistência")

    text = dump_document(layer.entries)

    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_name(target.name + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            tmp.unlink()

    logger.info("Layer %s salvo em %s (%d entradas)", layer.name, target, len(layer))
    return target


def create_empty_document(path: Path) -> Path:
    """Cria um documento vazio (e diretórios pais) sem sobrescrever existente."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)
    return path


__all__ = [
    "parse_document",
    "dump_document",
    "load_layer",
    "save_layer",
    "create_empty_document",
]
