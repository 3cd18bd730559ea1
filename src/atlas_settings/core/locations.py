# src/atlas_settings/core/locations.py
"""
Resolução dos caminhos dos layers opcionais.

Os dois layers opcionais usam o mesmo nome de arquivo e o mesmo formato:

    - local:  ao lado do programa em execução
    - shared: no diretório de dados do usuário, por aplicação

Precedência para o diretório local (maior → menor):
    1. Variável de ambiente ATLAS_SETTINGS_LOCAL_DIR
    2. Diretório do executável (aplicação congelada) ou do script principal
    3. Diretório de trabalho atual

Precedência para o diretório shared (maior → menor):
    1. Variável de ambiente ATLAS_SETTINGS_SHARED_DIR
    2. %APPDATA%/<app_name>
    3. $XDG_CONFIG_HOME/<app_name>
    4. ~/.config/<app_name>

Este módulo não cria diretórios nem arquivos; isso é responsabilidade
do bootstrapper.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


DEFAULT_APP_NAME = "AtlasSettings"
DEFAULT_FILENAME = "Settings.yaml"

ENV_LOCAL_DIR = "ATLAS_SETTINGS_LOCAL_DIR"
ENV_SHARED_DIR = "ATLAS_SETTINGS_SHARED_DIR"


@dataclass(frozen=True)
class SettingsLocations:
    """Caminhos absolutos dos documentos local e shared."""

    local_path: Path
    shared_path: Path


def _env_dir(env: Mapping[str, str], name: str) -> Optional[Path]:
    raw = env.get(name)
    if isinstance(raw, str) and raw.strip():
        return Path(raw.strip()).expanduser()
    return None


def program_dir() -> Path:
    """Diretório do programa em execução."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    main = sys.argv[0] if sys.argv else ""
    if main and Path(main).exists():
        return Path(main).resolve().parent

    return Path.cwd()


def user_data_dir(app_name: str, env: Optional[Mapping[str, str]] = None) -> Path:
    """Diretório de dados por usuário para `app_name`."""
    env = os.environ if env is None else env

    appdata = _env_dir(env, "APPDATA")
    if appdata is not None:
        return appdata / app_name

    xdg = _env_dir(env, "XDG_CONFIG_HOME")
    if xdg is not None:
        return xdg / app_name

    return Path.home() / ".config" / app_name


def resolve_locations(
    *,
    app_name: str = DEFAULT_APP_NAME,
    filename: str = DEFAULT_FILENAME,
    env: Optional[Mapping[str, str]] = None,
) -> SettingsLocations:
    """
    Resolve os caminhos dos documentos local e shared.

    Args:
        app_name: Nome do diretório da aplicação dentro dos dados do usuário.
        filename: Nome do documento (o mesmo para os dois layers).
        env: Ambiente a consultar; por padrão `os.environ`.

    Returns:
        SettingsLocations: Caminhos absolutos (não necessariamente existentes).
    """
    env = os.environ if env is None else env

    local_dir = _env_dir(env, ENV_LOCAL_DIR) or program_dir()
    shared_dir = _env_dir(env, ENV_SHARED_DIR) or user_data_dir(app_name, env)

    return SettingsLocations(
        local_path=(local_dir / filename).absolute(),
        shared_path=(shared_dir / filename).absolute(),
    )


__all__ = [
    "SettingsLocations",
    "resolve_locations",
    "program_dir",
    "user_data_dir",
    "DEFAULT_APP_NAME",
    "DEFAULT_FILENAME",
    "ENV_LOCAL_DIR",
    "ENV_SHARED_DIR",
]
