"""
Conduit — transport/config.py
Transport design variables and their TOML override layer.
=========================================================
Version:     0.1
Stack:       Python 3.11+ | Pydantic v2 | tomllib
Status:      Production-ready.

Design Variables (all values configurable — do not hardcode)
-------------------------------------------------------------
  PROBE_FLUID                "water"  — stand-in for "any fluid" when probing
                                        acceptors for connectivity
  STRICT_ACCEPTOR_CONTRACT   False    — raise instead of report when an
                                        acceptor accepts outside [0, offered]
  DEFAULT_PIPE_TIER          "basic"  — tier for pipes spawned without one
  JOURNAL_SIGNIFICANCE_MIN   2        — minimum significance to journal

Overrides live in data/transport.toml. Missing file = defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

# ============================================================
# DESIGN VARIABLE DEFAULTS
# Change here or override via data/transport.toml.
# ============================================================

PROBE_FLUID: str = "water"
STRICT_ACCEPTOR_CONTRACT: bool = False
DEFAULT_PIPE_TIER: str = "basic"
JOURNAL_SIGNIFICANCE_MIN: int = 2

CONFIG_PATH = Path(__file__).parent.parent / "data" / "transport.toml"


class TransportConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    probe_fluid: str = PROBE_FLUID
    strict_acceptor_contract: bool = STRICT_ACCEPTOR_CONTRACT
    default_pipe_tier: str = DEFAULT_PIPE_TIER
    journal_significance_min: int = JOURNAL_SIGNIFICANCE_MIN


_CONFIG_CACHE: Optional[TransportConfig] = None


def load_config(path: Optional[Path] = None) -> TransportConfig:
    """
    Loads TransportConfig. The default path is cached globally;
    an explicit path is always read fresh.
    """
    global _CONFIG_CACHE
    if path is None and _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    source = path if path is not None else CONFIG_PATH
    if not source.exists():
        config = TransportConfig()
    else:
        with open(source, "rb") as f:
            data = tomllib.load(f)
        config = TransportConfig(**data)

    if path is None:
        _CONFIG_CACHE = config
    return config


def reset_config_cache() -> None:
    global _CONFIG_CACHE
    _CONFIG_CACHE = None
