# tests/core/layer/test_layer_entries.py
"""
Testes do Layer e do layer default somente leitura.

Os testes asseguram que:
- a ordem de inserção das entradas é preservada
- o layer default rejeita escrita via `set` e via `entries`
"""

import pytest

from atlas_settings.core.errors import ImmutableLayerError, SettingsError
from atlas_settings.core.layer import DEFAULT, LOCAL, Layer, default_layer


def test_layer_preserves_insertion_order():
    layer = Layer(name=LOCAL)
    layer.set("B", 1)
    layer.set("A", 2)
    layer.set("B", 3)

    assert list(layer) == ["B", "A"]
    assert layer.get("B") == 3
    assert len(layer) == 2
    assert "A" in layer


def test_layer_get_missing_returns_default():
    layer = Layer(name=LOCAL)

    assert layer.get("Missing") is None
    assert layer.get("Missing", 5) == 5


def test_view_is_read_only():
    layer = Layer(name=LOCAL, entries={"A": 1})

    with pytest.raises(TypeError):
        layer.view()["A"] = 2


def test_default_layer_copies_entries_and_rejects_set():
    source = {"Quality": 10}
    layer = default_layer(source)
    source["Quality"] = 99

    assert layer.name == DEFAULT
    assert layer.backing_path is None
    assert layer.get("Quality") == 10

    with pytest.raises(ImmutableLayerError) as exc:
        layer.set("Quality", 1)

    assert isinstance(exc.value, SettingsError)


def test_default_layer_entries_are_read_only():
    layer = default_layer({"Quality": 10})

    with pytest.raises(TypeError):
        layer.entries["Quality"] = 1

    with pytest.raises(TypeError):
        del layer.entries["Quality"]

    assert layer.get("Quality") == 10
