"""
Conduit — transport/data_loader.py
JIT Data Loaders for TOML seed data powered by Pydantic.
========================================================
Version:     0.1
Stack:       Python 3.11+ | Pydantic v2 | tomllib
Status:      Core data validation and loading layer.
"""

import tomllib
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

# ================================================================================
# SCHEMAS
# ================================================================================

class FluidDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    name: str
    temperature: int = 295 # Kelvin
    density: int = 1000
    gaseous: bool = False

class FluidCollectionDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    fluids: List[FluidDef]

class PipeTierDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    name: str
    capacity: int = Field(ge=0)     # buffer size, mB
    pull_amount: int = Field(ge=0)  # max offered per tick, mB

class PipeTierCollectionDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    tiers: List[PipeTierDef]

# ================================================================================
# LOADERS & CACHE (JIT)
# ================================================================================

_FLUID_CACHE: Optional[Dict[str, FluidDef]] = None
_PIPE_TIER_CACHE: Optional[Dict[str, PipeTierDef]] = None


DATA_DIR = Path(__file__).parent.parent / "data"

def get_fluid_defs() -> List[FluidDef]:
    """Loads the fluid registry from TOML. Cached globally."""
    global _FLUID_CACHE
    if _FLUID_CACHE is not None:
        return list(_FLUID_CACHE.values())

    path = DATA_DIR / "fluids.toml"
    if not path.exists():
        return []

    with open(path, "rb") as f:
        data = tomllib.load(f)

    collection = FluidCollectionDef(**data)
    _FLUID_CACHE = {fluid.id: fluid for fluid in collection.fluids}
    return collection.fluids

def get_fluid_def(fluid_id: str) -> FluidDef:
    get_fluid_defs()
    if not _FLUID_CACHE or fluid_id not in _FLUID_CACHE:
        raise KeyError(f"Unknown fluid: {fluid_id}")
    return _FLUID_CACHE[fluid_id]

def is_registered_fluid(fluid_id: str) -> bool:
    get_fluid_defs()
    return bool(_FLUID_CACHE) and fluid_id in _FLUID_CACHE

def get_pipe_tier_defs() -> List[PipeTierDef]:
    """Loads pipe tiers from TOML. Cached globally."""
    global _PIPE_TIER_CACHE
    if _PIPE_TIER_CACHE is not None:
        return list(_PIPE_TIER_CACHE.values())

    path = DATA_DIR / "pipe_tiers.toml"
    if not path.exists():
        raise FileNotFoundError(f"Pipe tier table not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    collection = PipeTierCollectionDef(**data)
    _PIPE_TIER_CACHE = {tier.id: tier for tier in collection.tiers}
    return collection.tiers

def get_pipe_tier(tier_id: str) -> PipeTierDef:
    get_pipe_tier_defs()
    if tier_id not in _PIPE_TIER_CACHE:
        raise KeyError(f"Unknown pipe tier: {tier_id}")
    return _PIPE_TIER_CACHE[tier_id]
