# src/atlas_settings/accessors.py
"""
Acessores tipados sobre o `SettingsStore`.

Cada setting lógico é declarado uma única vez como `TypedSetting`, que liga
uma chave explícita (`SettingKey`) a um conversor de estreitamento. A leitura
falha com `ValueKindError` quando o valor armazenado não tem o tipo esperado;
a escrita delega ao `SettingsStore.set` sem validação adicional.

`UserSettings` declara um subconjunto representativo dos settings da
aplicação (gravação, opções, editor, salvamento, legenda, transições). Novos
settings seguem o mesmo padrão: uma constante em `SettingKey`, uma entrada em
`data/defaults.yaml` e um atributo `TypedSetting`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from .core.store import SettingsStore
from .core.values import (
    Color,
    EnumConstant,
    FontSpec,
    Rect,
    as_bool,
    as_color,
    as_enum,
    as_float,
    as_font,
    as_int,
    as_rect,
    as_str,
)


T = TypeVar("T")
E = TypeVar("E", bound=Enum)


# ---------------------------------------------------------------------------
# Enumerações usadas pelos settings
# ---------------------------------------------------------------------------

class Key(Enum):
    F1 = 1
    F2 = 2
    F3 = 3
    F4 = 4
    F5 = 5
    F6 = 6
    F7 = 7
    F8 = 8
    F9 = 9
    F10 = 10
    F11 = 11
    F12 = 12


class ModifierKeys(Enum):
    NONE = 0
    ALT = 1
    CONTROL = 2
    SHIFT = 4
    WINDOWS = 8


class WindowState(Enum):
    NORMAL = 0
    MINIMIZED = 1
    MAXIMIZED = 2


class Export(Enum):
    GIF = "gif"
    APNG = "apng"
    VIDEO = "video"
    IMAGES = "images"
    PROJECT = "project"
    PSD = "psd"


class VerticalAlignment(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
    STRETCH = "stretch"


class HorizontalAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    STRETCH = "stretch"


# ---------------------------------------------------------------------------
# Chaves explícitas
# ---------------------------------------------------------------------------

class SettingKey:
    """Nomes das chaves no store (iguais às chaves do documento)."""

    FULL_SCREEN_MODE = "FullScreenMode"
    SHOW_CURSOR = "ShowCursor"
    DETECT_MOUSE_CLICKS = "DetectMouseClicks"
    CLICK_COLOR = "ClickColor"
    LANGUAGE_CODE = "LanguageCode"
    LATEST_FPS = "LatestFps"
    RECORDER_LEFT = "RecorderLeft"
    RECORDER_TOP = "RecorderTop"
    RECORDER_WIDTH = "RecorderWidth"
    RECORDER_HEIGHT = "RecorderHeight"
    START_PAUSE_SHORTCUT = "StartPauseShortcut"
    START_PAUSE_MODIFIERS = "StartPauseModifiers"
    STOP_SHORTCUT = "StopShortcut"
    STOP_MODIFIERS = "StopModifiers"
    DISCARD_SHORTCUT = "DiscardShortcut"
    DISCARD_MODIFIERS = "DiscardModifiers"
    CHECK_FOR_UPDATES = "CheckForUpdates"
    GRID_COLOR_1 = "GridColor1"
    GRID_COLOR_2 = "GridColor2"
    GRID_SIZE = "GridSize"
    TEMPORARY_FOLDER = "TemporaryFolder"
    EDITOR_WINDOW_STATE = "EditorWindowState"
    EDITOR_WIDTH = "EditorWidth"
    EDITOR_HEIGHT = "EditorHeight"
    BOARD_GRID_SIZE = "BoardGridSize"
    SAVE_TYPE = "SaveType"
    LOOPED = "Looped"
    REPEAT_COUNT = "RepeatCount"
    REPEAT_FOREVER = "RepeatForever"
    QUALITY = "Quality"
    LATEST_OUTPUT_FOLDER = "LatestOutputFolder"
    LATEST_FILENAME = "LatestFilename"
    CAPTION_TEXT = "CaptionText"
    CAPTION_FONT = "CaptionFont"
    CAPTION_FONT_SIZE = "CaptionFontSize"
    CAPTION_FONT_COLOR = "CaptionFontColor"
    CAPTION_VERTICAL_ALIGNMENT = "CaptionVerticalAligment"
    CAPTION_HORIZONTAL_ALIGNMENT = "CaptionHorizontalAligment"
    TITLE_FRAME_FONT = "TitleFrameFont"
    FADE_TO_COLOR = "FadeToColor"
    FADE_TRANSITION_LENGTH = "FadeTransitionLength"


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------

class TypedSetting(Generic[T]):
    """
    Descriptor que liga um atributo a uma chave do store.

    Args:
        key: Chave no store.
        convert: Conversor `(valor, key=...) -> T` aplicado na leitura.
        encode: Conversão opcional aplicada na escrita (ex.: Enum → EnumConstant).
    """

    def __init__(
        self,
        key: str,
        convert: Callable[..., T],
        encode: Optional[Callable[[T], Any]] = None,
    ):
        self.key = key
        self.convert = convert
        self.encode = encode
        self.attr_name = key

    def __set_name__(self, owner: type, name: str) -> None:
        self.attr_name = name

    def __get__(self, obj: Optional["UserSettings"], objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return self.convert(obj.store.get(self.key), key=self.key)

    def __set__(self, obj: "UserSettings", value: T) -> None:
        obj.store.set(self.key, self.encode(value) if self.encode is not None else value)


def enum_setting(key: str, enum_cls: Type[E]) -> TypedSetting[E]:
    """`TypedSetting` para constantes enumeradas (armazenadas como `EnumConstant`)."""

    def convert(value: Any, *, key: Optional[str] = None) -> E:
        return as_enum(enum_cls, value, key=key)

    return TypedSetting(key, convert, encode=EnumConstant.of)


# ---------------------------------------------------------------------------
# Settings da aplicação
# ---------------------------------------------------------------------------

class UserSettings:
    """Acesso tipado aos settings da aplicação sobre um `SettingsStore` injetado."""

    def __init__(self, store: SettingsStore):
        self.store = store

    # Recorder
    full_screen_mode: TypedSetting[bool] = TypedSetting(SettingKey.FULL_SCREEN_MODE, as_bool)
    show_cursor: TypedSetting[bool] = TypedSetting(SettingKey.SHOW_CURSOR, as_bool)
    detect_mouse_clicks: TypedSetting[bool] = TypedSetting(SettingKey.DETECT_MOUSE_CLICKS, as_bool)
    click_color: TypedSetting[Color] = TypedSetting(SettingKey.CLICK_COLOR, as_color)
    language_code: TypedSetting[str] = TypedSetting(SettingKey.LANGUAGE_CODE, as_str)
    latest_fps: TypedSetting[int] = TypedSetting(SettingKey.LATEST_FPS, as_int)
    recorder_left: TypedSetting[float] = TypedSetting(SettingKey.RECORDER_LEFT, as_float)
    recorder_top: TypedSetting[float] = TypedSetting(SettingKey.RECORDER_TOP, as_float)
    recorder_width: TypedSetting[int] = TypedSetting(SettingKey.RECORDER_WIDTH, as_int)
    recorder_height: TypedSetting[int] = TypedSetting(SettingKey.RECORDER_HEIGHT, as_int)
    start_pause_shortcut = enum_setting(SettingKey.START_PAUSE_SHORTCUT, Key)
    start_pause_modifiers = enum_setting(SettingKey.START_PAUSE_MODIFIERS, ModifierKeys)
    stop_shortcut = enum_setting(SettingKey.STOP_SHORTCUT, Key)
    stop_modifiers = enum_setting(SettingKey.STOP_MODIFIERS, ModifierKeys)
    discard_shortcut = enum_setting(SettingKey.DISCARD_SHORTCUT, Key)
    discard_modifiers = enum_setting(SettingKey.DISCARD_MODIFIERS, ModifierKeys)

    # Options
    check_for_updates: TypedSetting[bool] = TypedSetting(SettingKey.CHECK_FOR_UPDATES, as_bool)
    grid_color_1: TypedSetting[Color] = TypedSetting(SettingKey.GRID_COLOR_1, as_color)
    grid_color_2: TypedSetting[Color] = TypedSetting(SettingKey.GRID_COLOR_2, as_color)
    grid_size: TypedSetting[Rect] = TypedSetting(SettingKey.GRID_SIZE, as_rect)
    temporary_folder: TypedSetting[str] = TypedSetting(SettingKey.TEMPORARY_FOLDER, as_str)

    # Editor
    editor_window_state = enum_setting(SettingKey.EDITOR_WINDOW_STATE, WindowState)
    editor_width: TypedSetting[float] = TypedSetting(SettingKey.EDITOR_WIDTH, as_float)
    editor_height: TypedSetting[float] = TypedSetting(SettingKey.EDITOR_HEIGHT, as_float)
    board_grid_size: TypedSetting[Rect] = TypedSetting(SettingKey.BOARD_GRID_SIZE, as_rect)

    # Save As
    save_type = enum_setting(SettingKey.SAVE_TYPE, Export)
    looped: TypedSetting[bool] = TypedSetting(SettingKey.LOOPED, as_bool)
    repeat_count: TypedSetting[int] = TypedSetting(SettingKey.REPEAT_COUNT, as_int)
    repeat_forever: TypedSetting[bool] = TypedSetting(SettingKey.REPEAT_FOREVER, as_bool)
    quality: TypedSetting[int] = TypedSetting(SettingKey.QUALITY, as_int)
    latest_output_folder: TypedSetting[str] = TypedSetting(SettingKey.LATEST_OUTPUT_FOLDER, as_str)
    latest_filename: TypedSetting[str] = TypedSetting(SettingKey.LATEST_FILENAME, as_str)

    # Caption
    caption_text: TypedSetting[str] = TypedSetting(SettingKey.CAPTION_TEXT, as_str)
    caption_font: TypedSetting[FontSpec] = TypedSetting(SettingKey.CAPTION_FONT, as_font)
    caption_font_size: TypedSetting[float] = TypedSetting(SettingKey.CAPTION_FONT_SIZE, as_float)
    caption_font_color: TypedSetting[Color] = TypedSetting(SettingKey.CAPTION_FONT_COLOR, as_color)
    caption_vertical_alignment = enum_setting(SettingKey.CAPTION_VERTICAL_ALIGNMENT, VerticalAlignment)
    caption_horizontal_alignment = enum_setting(
        SettingKey.CAPTION_HORIZONTAL_ALIGNMENT, HorizontalAlignment
    )

    # Title Frame
    title_frame_font: TypedSetting[FontSpec] = TypedSetting(SettingKey.TITLE_FRAME_FONT, as_font)

    # Transitions
    fade_to_color: TypedSetting[Color] = TypedSetting(SettingKey.FADE_TO_COLOR, as_color)
    fade_transition_length: TypedSetting[int] = TypedSetting(SettingKey.FADE_TRANSITION_LENGTH, as_int)


__all__ = [
    "Key",
    "ModifierKeys",
    "WindowState",
    "Export",
    "VerticalAlignment",
    "HorizontalAlignment",
    "SettingKey",
    "TypedSetting",
    "enum_setting",
    "UserSettings",
]
