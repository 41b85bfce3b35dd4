from __future__ import annotations

import abc
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

ContentObserver = Callable[[str], None]


@dataclass
class GlobalSettings:
    """Integer settings keyed by name, with per-name change observers."""

    values: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._observers: dict[str, list[ContentObserver]] = {}

    def get_int(self, name: str, default: int = 0) -> int:
        return int(self.values.get(name, default))

    def put_int(self, name: str, value: int) -> None:
        self.values[name] = int(value)
        for observer in list(self._observers.get(name, [])):
            observer(name)

    def register_observer(self, name: str, observer: ContentObserver) -> None:
        self._observers.setdefault(name, []).append(observer)

    def unregister_observer(self, name: str, observer: ContentObserver) -> None:
        observers = self._observers.get(name, [])
        if observer in observers:
            observers.remove(observer)


class SettingsGlobalBoolean:
    """Descriptor exposing a global integer setting as a bool.

    The owning instance must have a ``settings`` attribute holding a
    GlobalSettings.
    """

    def __init__(self, name: str):
        self.name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.settings.get_int(self.name, 0) != 0

    def __set__(self, obj: Any, value: bool) -> None:
        obj.settings.put_int(self.name, 1 if value else 0)


def settings_global_boolean(name: str) -> SettingsGlobalBoolean:
    return SettingsGlobalBoolean(name)


class LifecycleObserver(abc.ABC):
    def on_start(self) -> None:
        return None

    def on_stop(self) -> None:
        return None


class Lifecycle:
    def __init__(self) -> None:
        self._observers: list[LifecycleObserver] = []
        self.started = False

    def add_observer(self, observer: LifecycleObserver) -> None:
        self._observers.append(observer)
        # Late observers catch up with an already started owner.
        if self.started:
            observer.on_start()

    def start(self) -> None:
        if self.started:
            return
        self.started = True
        for o in self._observers:
            o.on_start()

    def stop(self) -> None:
        if not self.started:
            return
        self.started = False
        for o in reversed(self._observers):
            o.on_stop()


class _GlobalBooleanObserver(LifecycleObserver):
    def __init__(self, settings: GlobalSettings, name: str, on_change: Callable[[bool], None]):
        self._settings = settings
        self._name = name
        self._on_change = on_change

    def _value(self) -> bool:
        return self._settings.get_int(self._name, 0) != 0

    def _changed(self, _name: str) -> None:
        self._on_change(self._value())

    def on_start(self) -> None:
        self._settings.register_observer(self._name, self._changed)
        self._on_change(self._value())

    def on_stop(self) -> None:
        self._settings.unregister_observer(self._name, self._changed)


def observe_settings_global_boolean(
    settings: GlobalSettings,
    name: str,
    lifecycle: Lifecycle,
    on_change: Callable[[bool], None],
) -> None:
    """Report the flag's value on every lifecycle start and on each change while started."""

    lifecycle.add_observer(_GlobalBooleanObserver(settings, name, on_change))
