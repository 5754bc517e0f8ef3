"""
Configuration loading from config.yaml.

Uses typed dataclasses throughout so the rest of the app gets IDE
completion and type-checker support without touching raw dicts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import get_args

import yaml

from knights.events import DrawHandling
from knights.knight import MAX_GOLD, Knight
from knights.tournament import Tournament

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TournamentConfig:
    draw_handling: DrawHandling = "requeue"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str | None = None   # rotating log file; None = console only

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass
class KnightEntry:
    gold: int
    weapon_class: int
    armour_class: int


@dataclass
class Config:
    tournament: TournamentConfig = field(default_factory=TournamentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    knights: list[KnightEntry] = field(default_factory=list)

    def build_knights(self) -> list[Knight]:
        return [Knight(k.gold, k.weapon_class, k.armour_class) for k in self.knights]

    def build_tournament(self) -> Tournament:
        return Tournament(
            self.build_knights(),
            draw_handling=self.tournament.draw_handling,
        )


def load_config(path: str | Path = "config.yaml") -> Config:
    """
    Load and validate config.yaml.

    Raises:
        FileNotFoundError: config.yaml is missing.
        ValueError: required fields are absent or invalid.
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {cfg_path.resolve()}\n"
            "Copy config.example.yaml to config.yaml and edit the roster."
        )

    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    try:
        tournament_raw = raw.get("tournament") or {}
        tournament_cfg = TournamentConfig(
            draw_handling=tournament_raw.get("draw_handling", "requeue"),
        )

        logging_raw = raw.get("logging") or {}
        log_file = logging_raw.get("file")
        logging_cfg = LoggingConfig(
            level=str(logging_raw.get("level", "INFO")).upper(),
            file=str(log_file) if log_file else None,
        )

        knights = [
            KnightEntry(
                gold=_parse_counter(k["gold"], "gold"),
                weapon_class=_parse_counter(k["weapon_class"], "weapon_class"),
                armour_class=_parse_counter(k["armour_class"], "armour_class"),
            )
            for k in raw.get("knights") or []
        ]

        config = Config(tournament=tournament_cfg, logging=logging_cfg, knights=knights)
        _validate(config)
        return config

    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Invalid config.yaml structure: {exc}") from exc


def _validate(config: Config) -> None:
    valid_draws = get_args(DrawHandling)
    if config.tournament.draw_handling not in valid_draws:
        raise ValueError(
            f"tournament.draw_handling must be one of {valid_draws}, "
            f"got '{config.tournament.draw_handling}'"
        )
    if config.logging.level not in _LOG_LEVELS:
        raise ValueError(
            f"logging.level must be one of {_LOG_LEVELS}, got '{config.logging.level}'"
        )
    for i, knight in enumerate(config.knights, 1):
        if knight.gold > MAX_GOLD:
            raise ValueError(f"knights[{i}].gold must be <= {MAX_GOLD}, got {knight.gold}")


def _parse_counter(value: object, name: str) -> int:
    # bool is an int subclass; `gold: true` is almost certainly a typo
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"knight.{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"knight.{name} must be >= 0, got {value}")
    return value
