from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from battery_tips.anomaly import AnomalyKind, PowerAnomalyEvent
from battery_tips.card import CardView
from battery_tips.metrics import MetricsFeatureProvider, SettingsAction
from battery_tips.tips import DEFAULT_TIPS, PresentationEntry, resolve

logger = logging.getLogger(__name__)


class AnomalyCardPresenter:
    """Fill the battery tips card from a power anomaly event.

    Holds references to the card and metrics provider but does not own them.
    """

    def __init__(
        self,
        context: Any,
        card: CardView,
        metrics: MetricsFeatureProvider,
        tips: Mapping[AnomalyKind, PresentationEntry] = DEFAULT_TIPS,
    ):
        self._context = context
        self._card = card
        self._metrics = metrics
        self._tips = tips

    def update(self, event: PowerAnomalyEvent | None) -> None:
        content = resolve(event, self._tips)
        if content is None:
            logger.debug("no anomaly, hiding tips card")
            self._card.set_visible(False)
            return

        # Everything must be populated before the card becomes visible.
        self._card.set_anomaly_event_id(content.id)
        self._card.set_title(content.title)
        self._card.set_main_button_label(content.main_button_label)
        self._card.set_dismiss_button_label(content.dismiss_button_label)
        self._card.set_main_button_launcher_info(
            content.launch_target.screen_ref, content.launch_target.source_metrics_id
        )
        self._card.set_visible(True)
        logger.debug("showing tips card %s", content.id)

        self._metrics.action(self._context, SettingsAction.BATTERY_TIPS_CARD_SHOW, content.id)
