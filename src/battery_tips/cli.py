from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping

import yaml

from battery_tips import __version__
from battery_tips.anomaly import AnomalyKind, PowerAnomalyEvent
from battery_tips.card import CardViewState
from battery_tips.config import ConfigError, load
from battery_tips.metrics import LoggingMetricsFeatureProvider
from battery_tips.paths import default_config_path
from battery_tips.screen import BatteryUsageScreen
from battery_tips.settings import GlobalSettings
from battery_tips.tips import DEFAULT_TIPS, PresentationEntry


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="battery-tips")
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-v", "--verbose", action="store_true")

    sub = ap.add_subparsers(dest="cmd", required=True)

    show = sub.add_parser("show", help="Print the tips card for an anomaly kind")
    show.add_argument("kind", choices=[k.value for k in AnomalyKind] + ["none"])
    show.add_argument("--title", help="Override the card title")
    show.add_argument("-c", "--config")
    show.add_argument("--disabled", action="store_true", help="Run with battery tips turned off")

    return ap


def _tips(config: str | None) -> Mapping[AnomalyKind, PresentationEntry]:
    if config:
        return load(config)
    fallback = default_config_path()
    if fallback.exists():
        return load(fallback)
    return DEFAULT_TIPS


def _event(kind: str, title: str | None) -> PowerAnomalyEvent | None:
    if kind == "none":
        return None
    event = PowerAnomalyEvent(AnomalyKind(kind))
    if title is not None:
        event = event.with_title(title)
    return event


def show(args: argparse.Namespace) -> CardViewState:
    card = CardViewState()
    settings = GlobalSettings()
    screen = BatteryUsageScreen(
        settings=settings,
        card=card,
        metrics=LoggingMetricsFeatureProvider(),
        tips=_tips(args.config),
    )
    screen.battery_tips_enabled = not args.disabled
    screen.start()
    try:
        screen.on_anomaly_updated(_event(args.kind, args.title))
    finally:
        screen.stop()
    return card


def main(argv: list[str] | None = None) -> None:
    ap = _build_parser()
    args = ap.parse_args(argv)
    if args.cmd == "show" and args.kind == "none" and args.title is not None:
        ap.error("--title needs an anomaly kind, not 'none'")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if args.cmd == "show":
        try:
            card = show(args)
        except (ConfigError, OSError) as e:
            raise SystemExit(f"battery-tips: {e}") from e
        print(yaml.safe_dump(card.as_dict(), sort_keys=False), end="")
