# src/atlas_settings/core/notifications.py
"""
Canal de notificação de mudanças.

Entrega síncrona, no mesmo fluxo de execução do `set`, na ordem de
registro dos observers. Cada observer recebe apenas o nome da chave
alterada; valores antigo e novo não são transmitidos.

Exceções levantadas por um observer são propagadas ao chamador do `set`
e interrompem a entrega aos observers seguintes.
"""

from __future__ import annotations

from typing import Callable, List


Observer = Callable[[str], None]


class ChangeNotifier:
    """Lista síncrona de observers de mudança de chave."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Observer:
        """Registra `observer` (retorna o próprio observer, útil como decorator)."""
        if not callable(observer):
            raise TypeError(f"Observer deve ser callable, recebido: {type(observer).__name__}")
        self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: Observer) -> bool:
        """Remove o primeiro registro de `observer`; retorna False se não registrado."""
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    def notify(self, key: str) -> None:
        # cópia: observers podem se desregistrar durante a entrega
        for observer in list(self._observers):
            observer(key)

    def __len__(self) -> int:
        return len(self._observers)


__all__ = ["ChangeNotifier", "Observer"]
