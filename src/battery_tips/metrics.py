from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class SettingsAction(enum.Enum):
    BATTERY_TIPS_CARD_SHOW = "battery_tips_card_show"


class MetricsFeatureProvider(Protocol):
    def action(self, context: Any, action: SettingsAction, tag: str) -> None: ...


@dataclass
class LoggingMetricsFeatureProvider:
    """Writes actions to the log instead of an analytics backend."""

    recorded: list[tuple[SettingsAction, str]] = field(default_factory=list)

    def action(self, context: Any, action: SettingsAction, tag: str) -> None:
        logger.info("metrics action=%s tag=%s", action.value, tag)
        self.recorded.append((action, tag))
