from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from battery_tips.anomaly import AnomalyKind, PowerAnomalyEvent


class UnknownAnomalyError(LookupError):
    pass


@dataclass(frozen=True)
class LaunchTarget:
    screen_ref: str
    source_metrics_id: int


@dataclass(frozen=True)
class PresentationEntry:
    id: str
    default_title: str
    main_button_label: str
    dismiss_button_label: str
    launch_target: LaunchTarget


DEFAULT_TIPS: Mapping[AnomalyKind, PresentationEntry] = MappingProxyType(
    {
        AnomalyKind.ADAPTIVE_BRIGHTNESS: PresentationEntry(
            id="BrightnessAnomaly",
            default_title="Turn on adaptive brightness to extend battery life",
            main_button_label="View Settings",
            dismiss_button_label="Got it",
            launch_target=LaunchTarget(
                screen_ref="com.android.settings.display.AutoBrightnessSettings",
                source_metrics_id=1381,
            ),
        ),
        AnomalyKind.SCREEN_TIMEOUT: PresentationEntry(
            id="ScreenTimeoutAnomaly",
            default_title="Reduce screen timeout to extend battery life",
            main_button_label="View Settings",
            dismiss_button_label="Got it",
            launch_target=LaunchTarget(
                screen_ref="com.android.settings.display.ScreenTimeoutSettings",
                source_metrics_id=1852,
            ),
        ),
    }
)


def tip_for(
    kind: AnomalyKind, tips: Mapping[AnomalyKind, PresentationEntry] = DEFAULT_TIPS
) -> PresentationEntry:
    try:
        return tips[kind]
    except KeyError:
        raise UnknownAnomalyError(f"Unrecognized anomaly kind: {kind!r}") from None


@dataclass(frozen=True)
class CardContent:
    id: str
    title: str
    main_button_label: str
    dismiss_button_label: str
    launch_target: LaunchTarget


def resolve(
    event: PowerAnomalyEvent | None,
    tips: Mapping[AnomalyKind, PresentationEntry] = DEFAULT_TIPS,
) -> CardContent | None:
    """Decide what the tips card shows for ``event``.

    Returns None when there is no anomaly, meaning the card is hidden.
    """

    if event is None:
        return None

    entry = tip_for(event.kind, tips)
    title = event.banner.title_override
    if title is None:
        title = entry.default_title

    return CardContent(
        id=entry.id,
        title=title,
        main_button_label=entry.main_button_label,
        dismiss_button_label=entry.dismiss_button_label,
        launch_target=entry.launch_target,
    )
