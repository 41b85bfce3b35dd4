from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from battery_tips.anomaly import AnomalyKind, PowerAnomalyEvent
from battery_tips.card import CardView
from battery_tips.metrics import MetricsFeatureProvider
from battery_tips.presenter import AnomalyCardPresenter
from battery_tips.settings import (
    GlobalSettings,
    Lifecycle,
    observe_settings_global_boolean,
    settings_global_boolean,
)
from battery_tips.tips import DEFAULT_TIPS, PresentationEntry

logger = logging.getLogger(__name__)

BATTERY_TIPS_ENABLED = "battery_tips_enabled"


@dataclass
class BatteryUsageScreen:
    settings: GlobalSettings
    card: CardView
    metrics: MetricsFeatureProvider
    context: Any = None
    tips: Mapping[AnomalyKind, PresentationEntry] = field(default_factory=lambda: DEFAULT_TIPS)

    battery_tips_enabled = settings_global_boolean(BATTERY_TIPS_ENABLED)

    def __post_init__(self) -> None:
        self.lifecycle = Lifecycle()
        self.presenter = AnomalyCardPresenter(
            self.context if self.context is not None else self,
            self.card,
            self.metrics,
            self.tips,
        )
        self.tips_enabled = False
        self._last_event: PowerAnomalyEvent | None = None
        observe_settings_global_boolean(
            self.settings, BATTERY_TIPS_ENABLED, self.lifecycle, self._on_tips_enabled_changed
        )

    def _on_tips_enabled_changed(self, enabled: bool) -> None:
        changed = enabled != self.tips_enabled
        self.tips_enabled = enabled
        logger.debug("battery tips enabled=%s", enabled)
        if changed:
            self._refresh()

    def _refresh(self) -> None:
        if self.tips_enabled:
            self.presenter.update(self._last_event)
        else:
            self.presenter.update(None)

    def on_anomaly_updated(self, event: PowerAnomalyEvent | None) -> None:
        self._last_event = event
        self._refresh()

    def start(self) -> None:
        self.lifecycle.start()

    def stop(self) -> None:
        self.lifecycle.stop()
