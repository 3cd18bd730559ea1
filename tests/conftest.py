# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Settings.

Este módulo define fixtures reutilizáveis que fornecem:
- entradas default mínimas e determinísticas (sem o recurso embarcado)
- caminhos isolados para os documentos local e shared (via `tmp_path`)
- uma factory de `SettingsStore` já inicializado

Invariantes:
    - Nenhuma fixture lê ou grava fora de `tmp_path`
    - Nenhuma fixture depende de variáveis de ambiente
    - Cada teste recebe caminhos e stores independentes

Limites explícitos:
    - Não substitui testes do layer default embarcado
    - Não cria documentos local/shared por conta própria
"""

from pathlib import Path

import pytest


@pytest.fixture
def defaults_entries() -> dict:
    """
    Entradas do layer default usadas pelos testes do store.

    Cobre todos os tipos de valor suportados e uma chave com valor None
    (para exercitar o fallback informado pelo chamador).

    Returns:
        dict: Entradas default determinísticas.
    """
    from atlas_settings.core.values import Color, EnumConstant, FontSpec, Rect

    return {
        "Looped": False,
        "RepeatCount": 0,
        "Quality": 10,
        "EditorWidth": 700.0,
        "LatestFilename": "Animation",
        "ClickColor": Color(120, 255, 255, 0),
        "GridSize": Rect(0.0, 0.0, 20.0, 20.0),
        "CaptionFont": FontSpec(family="Segoe UI", style="Normal", weight="Bold"),
        "StopShortcut": EnumConstant("Key", "F8"),
        "TemporaryFolder": None,
    }


@pytest.fixture
def locations(tmp_path: Path):
    """
    Caminhos isolados para os documentos local e shared.

    O documento local fica em `<tmp>/app/` (diretório do "programa") e o
    shared em `<tmp>/appdata/AtlasSettings/` (dados do usuário). Nenhum dos
    dois existe no início do teste.
    """
    from atlas_settings.core.locations import SettingsLocations

    return SettingsLocations(
        local_path=tmp_path / "app" / "Settings.yaml",
        shared_path=tmp_path / "appdata" / "AtlasSettings" / "Settings.yaml",
    )


@pytest.fixture
def write_document():
    """Grava um documento de settings (texto YAML) criando diretórios pais."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_store(locations, defaults_entries):
    """Factory de `SettingsStore` inicializado sobre `locations` e `defaults_entries`."""
    from atlas_settings.core.store import SettingsStore

    def _make():
        return SettingsStore.bootstrap(locations, defaults=defaults_entries)

    return _make
