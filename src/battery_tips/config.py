from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from battery_tips.anomaly import AnomalyKind
from battery_tips.tips import LaunchTarget, PresentationEntry


class ConfigError(ValueError):
    pass


_TEXT_FIELDS = ("id", "title", "main_button", "dismiss_button")


def _require(cfg: dict[str, Any], key: str, where: str) -> Any:
    if key not in cfg:
        raise ConfigError(f"Missing required config key: {where}.{key}")
    return cfg[key]


def _require_text(cfg: dict[str, Any], key: str, where: str) -> str:
    value = _require(cfg, key, where)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{where}.{key} must be a non-empty string")
    return value


def load(path: str | Path) -> dict[AnomalyKind, PresentationEntry]:
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    normalize(data)
    validate(data)
    return build_tips(data)


def normalize(cfg: dict[str, Any]) -> None:
    """Strip stray whitespace from tip strings in place."""

    tips = cfg.get("tips")
    if not isinstance(tips, dict):
        return
    for tip in tips.values():
        if not isinstance(tip, dict):
            continue
        for key in _TEXT_FIELDS:
            if isinstance(tip.get(key), str):
                tip[key] = tip[key].strip()
        launch = tip.get("launch")
        if isinstance(launch, dict) and isinstance(launch.get("screen"), str):
            launch["screen"] = launch["screen"].strip()


def validate(cfg: dict[str, Any]) -> None:
    tips = cfg.get("tips")
    if not isinstance(tips, dict) or not tips:
        raise ConfigError("tips must be a non-empty mapping")

    known = {k.value for k in AnomalyKind}
    for name in tips:
        if name not in known:
            raise ConfigError(f"tips references unknown anomaly kind: {name}")

    # Table must be exhaustive.
    missing = sorted(known - set(tips))
    if missing:
        raise ConfigError(f"tips is missing anomaly kinds: {', '.join(missing)}")

    for name, tip in tips.items():
        where = f"tips.{name}"
        if not isinstance(tip, dict):
            raise ConfigError(f"{where} must be a mapping")
        for key in _TEXT_FIELDS:
            _require_text(tip, key, where)

        launch = _require(tip, "launch", where)
        if not isinstance(launch, dict):
            raise ConfigError(f"{where}.launch must be a mapping")
        _require_text(launch, "screen", f"{where}.launch")
        metrics_id = _require(launch, "source_metrics_id", f"{where}.launch")
        if isinstance(metrics_id, bool) or not isinstance(metrics_id, int) or metrics_id <= 0:
            raise ConfigError(f"{where}.launch.source_metrics_id must be a positive integer")


def build_tips(cfg: dict[str, Any]) -> dict[AnomalyKind, PresentationEntry]:
    out: dict[AnomalyKind, PresentationEntry] = {}
    for name, tip in cfg["tips"].items():
        out[AnomalyKind(name)] = PresentationEntry(
            id=tip["id"],
            default_title=tip["title"],
            main_button_label=tip["main_button"],
            dismiss_button_label=tip["dismiss_button"],
            launch_target=LaunchTarget(
                screen_ref=tip["launch"]["screen"],
                source_metrics_id=int(tip["launch"]["source_metrics_id"]),
            ),
        )
    return out
