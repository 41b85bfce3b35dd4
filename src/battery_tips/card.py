from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Protocol

from battery_tips.tips import LaunchTarget


class CardView(Protocol):
    """Setter surface of the tips card widget."""

    def set_anomaly_event_id(self, anomaly_event_id: str) -> None: ...

    def set_title(self, title: str) -> None: ...

    def set_main_button_label(self, label: str) -> None: ...

    def set_dismiss_button_label(self, label: str) -> None: ...

    def set_main_button_launcher_info(self, screen_ref: str, source_metrics_id: int) -> None: ...

    def set_visible(self, visible: bool) -> None: ...


@dataclass
class CardViewState:
    visible: bool = False
    id: str | None = None
    title: str | None = None
    main_button_label: str | None = None
    dismiss_button_label: str | None = None
    launch_target: LaunchTarget | None = None

    def set_anomaly_event_id(self, anomaly_event_id: str) -> None:
        self.id = anomaly_event_id

    def set_title(self, title: str) -> None:
        self.title = title

    def set_main_button_label(self, label: str) -> None:
        self.main_button_label = label

    def set_dismiss_button_label(self, label: str) -> None:
        self.dismiss_button_label = label

    def set_main_button_launcher_info(self, screen_ref: str, source_metrics_id: int) -> None:
        self.launch_target = LaunchTarget(screen_ref, int(source_metrics_id))

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
