# blocktris/core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from .constants import DEFAULT_TICK_MS

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///blocktris_scores.db"
# a pasta padrão não vem no pacote: ver BLOCKTRIS_SOUND_DIR no .env.example
DEFAULT_SOUND_DIR = str(Path(__file__).resolve().parent.parent / "assets" / "sounds")

_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    database_url: str
    tick_interval_ms: int
    sound_on: bool
    sound_dir: str
    log_level: str


def _as_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def _as_tick(raw: str | None) -> int:
    if not raw:
        return DEFAULT_TICK_MS
    try:
        return int(raw)
    except ValueError:
        logger.warning(
            "BLOCKTRIS_TICK_MS inválido (%r), usando %dms", raw, DEFAULT_TICK_MS
        )
        return DEFAULT_TICK_MS


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """
    Lê a configuração do ambiente (e do .env, se existir).
    Passar `env` explicitamente ignora o .env e o os.environ.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    # o intervalo não é validado: zero ou negativo fica por conta de quem chama
    tick = _as_tick(env.get("BLOCKTRIS_TICK_MS"))

    return Settings(
        database_url=env.get("DATABASE_URL") or DEFAULT_DATABASE_URL,
        tick_interval_ms=tick,
        sound_on=_as_bool(env.get("BLOCKTRIS_SOUND"), True),
        sound_dir=env.get("BLOCKTRIS_SOUND_DIR") or DEFAULT_SOUND_DIR,
        log_level=(env.get("BLOCKTRIS_LOG_LEVEL") or "INFO").upper(),
    )
