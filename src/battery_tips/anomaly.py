from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class AnomalyKind(enum.Enum):
    ADAPTIVE_BRIGHTNESS = "adaptive_brightness"
    SCREEN_TIMEOUT = "screen_timeout"


@dataclass(frozen=True)
class WarningBannerInfo:
    title_override: str | None = None


@dataclass(frozen=True)
class PowerAnomalyEvent:
    kind: AnomalyKind
    banner: WarningBannerInfo = field(default_factory=WarningBannerInfo)

    def with_title(self, title: str) -> PowerAnomalyEvent:
        return replace(self, banner=replace(self.banner, title_override=title))
