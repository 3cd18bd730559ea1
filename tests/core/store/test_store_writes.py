# tests/core/store/test_store_writes.py
"""
Testes da política de escrita, persistência e notificação do SettingsStore.

Os testes asseguram que:
- `set` grava em todos os layers opcionais ativos e na live view
- `save` grava exatamente um documento (local se ativo, senão shared)
- observers são notificados de forma síncrona, na ordem de registro

Limites explícitos:
    - Não valida a política de leitura (ver test_store_resolution.py)
"""

import pytest

from atlas_settings.core.codec import load_layer
from atlas_settings.core.errors import ImmutableLayerError
from atlas_settings.core.layer import default_layer
from atlas_settings.core.store import SettingsStore
from atlas_settings.core.values import Rect


def _store_with_both_layers(locations, write_document, defaults_entries):
    write_document(locations.local_path, "")
    write_document(locations.shared_path, "Quality: 50\n")
    return SettingsStore.bootstrap(locations, defaults=defaults_entries)


def test_set_fans_out_to_every_optional_layer(locations, write_document, defaults_entries):
    store = _store_with_both_layers(locations, write_document, defaults_entries)

    store.set("RepeatCount", 3)

    assert store.local_layer.get("RepeatCount") == 3
    assert store.shared_layer.get("RepeatCount") == 3
    assert store.live_view["RepeatCount"] == 3
    assert store.get("RepeatCount") == 3


def test_set_does_not_touch_default_layer(make_store, defaults_entries):
    store = make_store()

    store.set("Quality", 99)

    assert store.default_layer.get("Quality") == defaults_entries["Quality"]
    assert store.get("Quality") == 99


def test_set_does_not_validate_value_kind(make_store):
    store = make_store()

    store.set("Quality", "high")
    store.set("GridSize", Rect(1, 1, 5, 5))

    assert store.get("Quality") == "high"
    assert store.get("GridSize") == Rect(1, 1, 5, 5)


def test_set_without_optional_layers_updates_live_view_only():
    store = SettingsStore(default=default_layer({"Looped": False}))

    store.set("Looped", True)

    assert store.get("Looped") is True
    assert store.save() is None


def test_save_writes_only_local_when_both_active(locations, write_document, defaults_entries):
    store = _store_with_both_layers(locations, write_document, defaults_entries)
    shared_before = locations.shared_path.read_bytes()

    store.set("RepeatCount", 3)
    written = store.save()

    assert written == locations.local_path
    assert load_layer(locations.local_path, name="local").get("RepeatCount") == 3
    assert locations.shared_path.read_bytes() == shared_before


def test_save_writes_shared_when_local_inactive(make_store, locations):
    store = make_store()

    store.set("Looped", True)
    written = store.save()

    assert written == locations.shared_path
    assert load_layer(locations.shared_path, name="shared").entries == {"Looped": True}
    assert not locations.local_path.exists()


def test_save_twice_is_byte_identical(make_store, locations):
    store = make_store()
    store.set("RepeatCount", 3)
    store.set("GridSize", Rect(0, 0, 10, 10))

    store.save()
    first = locations.shared_path.read_bytes()
    store.save()

    assert locations.shared_path.read_bytes() == first


def test_saved_values_survive_restart(make_store):
    store = make_store()
    store.set("RepeatCount", 4)
    store.save()

    restarted = make_store()

    assert restarted.get("RepeatCount") == 4


def test_notifications_are_synchronous_and_ordered(make_store):
    store = make_store()
    received = []

    store.subscribe(lambda key: received.append(("a", key, store.get(key))))
    store.subscribe(lambda key: received.append(("b", key, store.get(key))))

    store.set("RepeatCount", 3)

    assert received == [("a", "RepeatCount", 3), ("b", "RepeatCount", 3)]


def test_unsubscribe_stops_delivery(make_store):
    store = make_store()
    received = []

    def observer(key):
        received.append(key)

    store.subscribe(observer)
    store.set("Looped", True)
    assert store.unsubscribe(observer) is True
    store.set("Looped", False)

    assert received == ["Looped"]
    assert store.unsubscribe(observer) is False


def test_observer_errors_propagate_to_caller(make_store):
    store = make_store()

    def broken(key):
        raise RuntimeError(key)

    store.subscribe(broken)

    with pytest.raises(RuntimeError):
        store.set("Looped", True)

    # o valor já foi aplicado antes da notificação
    assert store.get("Looped") is True


def test_default_layer_rejects_writes(make_store):
    store = make_store()

    with pytest.raises(ImmutableLayerError):
        store.default_layer.set("Quality", 1)


def test_default_entries_cannot_be_mutated_through_store(make_store, defaults_entries):
    store = make_store()

    with pytest.raises(TypeError):
        store.default_layer.entries["Quality"] = 1

    assert store.default_layer.get("Quality") == defaults_entries["Quality"]
