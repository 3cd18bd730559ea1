# src/atlas_settings/core/values.py
"""
Tipos de valor suportados pelo store de settings.

O store armazena valores de forma opaca (não valida o tipo no `set`), mas o
conjunto de tipos que o codec sabe persistir é fechado:

    - escalares nativos: bool, int, float, str
    - `EnumConstant`: constante enumerada armazenada por nome
    - `Color`: cor ARGB
    - `Rect`: retângulo (x, y, largura, altura)
    - `FontSpec`: descritor de fonte (família, tamanho, estilo, peso)

Os conversores `as_*` fazem o estreitamento para o tipo semântico esperado
pelo acessor tipado e levantam `ValueKindError` quando o valor armazenado
não corresponde. Nenhum conversor valida semântica (faixas, cores válidas
para a UI etc.).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

from .errors import ValueKindError


E = TypeVar("E", bound=Enum)

_HEX_COLOR_RE = re.compile(r"^#(?P<digits>[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


@dataclass(frozen=True)
class Color:
    """Cor ARGB com canais inteiros de 0 a 255."""

    a: int
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in ("a", "r", "g", "b"):
            v = getattr(self, channel)
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"Canal {channel!r} inválido para Color: {v!r}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(255, r, g, b)

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Interpreta `#AARRGGBB` ou `#RRGGBB` (alpha implícito 255)."""
        m = _HEX_COLOR_RE.match(text.strip()) if isinstance(text, str) else None
        if m is None:
            raise ValueError(f"Cor inválida: {text!r}")

        digits = m.group("digits")
        if len(digits) == 6:
            digits = "FF" + digits

        a, r, g, b = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
        return cls(a, r, g, b)

    def to_hex(self) -> str:
        return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class Rect:
    """Retângulo em coordenadas de tela (unidades independentes de dispositivo)."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_sequence(cls, values: Sequence[Any]) -> "Rect":
        if len(values) != 4:
            raise ValueError(f"Rect requer 4 componentes, recebido {len(values)}")
        for v in values:
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ValueError(f"Componente inválido para Rect: {v!r}")
        return cls(*(float(v) for v in values))

    def to_list(self) -> List[float]:
        return [float(self.x), float(self.y), float(self.width), float(self.height)]


@dataclass(frozen=True)
class FontSpec:
    """
    Descritor de fonte.

    Campos:
    - family: nome da família (ex.: "Segoe UI")
    - size: tamanho em pontos; None quando o setting não define tamanho
    - style: "Normal", "Italic" ou "Oblique"
    - weight: nome do peso ("Normal", "Bold", "SemiBold"...)
    """

    family: str
    size: Optional[float] = None
    style: str = "Normal"
    weight: str = "Normal"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"family": self.family}
        if self.size is not None:
            data["size"] = float(self.size)
        data["style"] = self.style
        data["weight"] = self.weight
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FontSpec":
        if not isinstance(data, dict):
            raise ValueError(f"FontSpec requer mapa, recebido {type(data).__name__}")

        unknown = set(data) - {"family", "size", "style", "weight"}
        if unknown:
            raise ValueError(f"Campos desconhecidos em FontSpec: {sorted(unknown)}")

        family = data.get("family")
        if not isinstance(family, str) or not family:
            raise ValueError(f"FontSpec.family inválido: {family!r}")

        size = data.get("size")
        if size is not None:
            if isinstance(size, bool) or not isinstance(size, (int, float)):
                raise ValueError(f"FontSpec.size inválido: {size!r}")
            size = float(size)

        return cls(
            family=family,
            size=size,
            style=str(data.get("style", "Normal")),
            weight=str(data.get("weight", "Normal")),
        )


@dataclass(frozen=True)
class EnumConstant:
    """
    Constante enumerada armazenada por nome (`<Tipo>.<Membro>`).

    O store não conhece as classes `Enum` da aplicação; a conversão para o
    membro concreto é feita pelo acessor tipado via `to_enum`.
    """

    enum_type: str
    member: str

    @classmethod
    def of(cls, member: Enum) -> "EnumConstant":
        return cls(type(member).__name__, member.name)

    @classmethod
    def parse(cls, text: str) -> "EnumConstant":
        enum_type, sep, member = str(text).rpartition(".")
        if not sep or not enum_type or not member:
            raise ValueError(f"Constante enumerada inválida: {text!r}")
        return cls(enum_type, member)

    def to_enum(self, enum_cls: Type[E]) -> E:
        if self.enum_type != enum_cls.__name__:
            raise ValueKindError(enum_cls.__name__, self)
        try:
            return enum_cls[self.member]
        except KeyError:
            raise ValueKindError(enum_cls.__name__, self) from None

    def __str__(self) -> str:
        return f"{self.enum_type}.{self.member}"


SettingValue = Union[bool, int, float, str, EnumConstant, Color, Rect, FontSpec]


# ---------------------------------------------------------------------------
# Conversores de estreitamento
# ---------------------------------------------------------------------------

def as_bool(value: Any, *, key: Optional[str] = None) -> bool:
    if not isinstance(value, bool):
        raise ValueKindError("bool", value, key)
    return value


def as_int(value: Any, *, key: Optional[str] = None) -> int:
    # bool é subclasse de int; aqui é tratado como outro tipo
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueKindError("int", value, key)
    return value


def as_float(value: Any, *, key: Optional[str] = None) -> float:
    """Aceita int (documentos editados à mão gravam `3` para `3.0`)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueKindError("float", value, key)
    return float(value)


def as_str(value: Any, *, key: Optional[str] = None) -> str:
    if not isinstance(value, str):
        raise ValueKindError("str", value, key)
    return value


def as_color(value: Any, *, key: Optional[str] = None) -> Color:
    if not isinstance(value, Color):
        raise ValueKindError("Color", value, key)
    return value


def as_rect(value: Any, *, key: Optional[str] = None) -> Rect:
    if not isinstance(value, Rect):
        raise ValueKindError("Rect", value, key)
    return value


def as_font(value: Any, *, key: Optional[str] = None) -> FontSpec:
    if not isinstance(value, FontSpec):
        raise ValueKindError("FontSpec", value, key)
    return value


def as_enum(enum_cls: Type[E], value: Any, *, key: Optional[str] = None) -> E:
    """Converte `EnumConstant` (ou um membro já concreto) para `enum_cls`."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, EnumConstant):
        raise ValueKindError(enum_cls.__name__, value, key)
    try:
        return value.to_enum(enum_cls)
    except ValueKindError:
        raise ValueKindError(enum_cls.__name__, value, key) from None


__all__ = [
    "Color",
    "Rect",
    "FontSpec",
    "EnumConstant",
    "SettingValue",
    "as_bool",
    "as_int",
    "as_float",
    "as_str",
    "as_color",
    "as_rect",
    "as_font",
    "as_enum",
]
