from __future__ import annotations

from battery_tips.settings import (
    GlobalSettings,
    Lifecycle,
    observe_settings_global_boolean,
    settings_global_boolean,
)


class _Holder:
    flag = settings_global_boolean("some_flag")

    def __init__(self, settings: GlobalSettings):
        self.settings = settings


def test_boolean_reads_nonzero_as_true() -> None:
    settings = GlobalSettings()
    holder = _Holder(settings)
    assert holder.flag is False

    settings.put_int("some_flag", 2)
    assert holder.flag is True


def test_boolean_writes_one_and_zero() -> None:
    settings = GlobalSettings()
    holder = _Holder(settings)

    holder.flag = True
    assert settings.get_int("some_flag") == 1
    holder.flag = False
    assert settings.get_int("some_flag") == 0


def test_observer_reports_on_start_and_changes_until_stop() -> None:
    settings = GlobalSettings()
    lifecycle = Lifecycle()
    seen: list[bool] = []
    observe_settings_global_boolean(settings, "some_flag", lifecycle, seen.append)

    settings.put_int("some_flag", 1)
    assert seen == []

    lifecycle.start()
    assert seen == [True]

    settings.put_int("some_flag", 0)
    settings.put_int("other_flag", 1)
    assert seen == [True, False]

    lifecycle.stop()
    settings.put_int("some_flag", 1)
    assert seen == [True, False]

    lifecycle.start()
    assert seen == [True, False, True]


def test_observer_added_after_start_reports_immediately() -> None:
    settings = GlobalSettings()
    lifecycle = Lifecycle()
    lifecycle.start()
    seen: list[bool] = []

    observe_settings_global_boolean(settings, "some_flag", lifecycle, seen.append)

    assert seen == [False]


def test_unregister_unknown_observer_is_noop() -> None:
    settings = GlobalSettings()
    settings.unregister_observer("some_flag", lambda _name: None)
