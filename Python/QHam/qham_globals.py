"""
Centralized global singletons for the QHam package.

Provided Singletons
-------------------
- Global logger        : via `get_logger()` (returns the flog.Logger instance)
- Global RNG           : via `get_numpy_rng()` / `spawn_numpy_rng()` / `reseed_all()`

Usage Pattern
-------------
    from QHam.qham_globals import get_logger, get_numpy_rng

    log = get_logger()
    rng = get_numpy_rng()

Samplers called without a stream draw from the global generator. A model
without a ``seed`` owns a generator spawned from it, so models never share
a stream implicitly and `reseed_all(seed)` fixes the realizations of
unseeded models built afterwards.

!IMPORTANT: Do NOT perform side effects at module import other than creating
!lightweight sentinels; initialization is deferred until first access.
"""

from __future__ import annotations
from typing import Optional, Any
import threading

import numpy as np

_LOCK               = threading.Lock()

_LOGGER: Any        = None
_RNG: Any           = None
_SEED: Optional[int]= None

def get_logger(**kwargs):
    """
    Return the process-global logger instance.

    Parameters
    ----------
    **kwargs : dict
        Optional keyword arguments forwarded to `get_global_logger` the first
        time the logger is created.
    """
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER
    with _LOCK:
        if _LOGGER is None:
            from QHam.common.flog import get_global_logger
            _LOGGER = get_global_logger(**kwargs)
    return _LOGGER

# ----------------------------------------------------------------

def get_numpy_rng() -> np.random.Generator:
    """Return the process-global NumPy Generator."""
    global _RNG
    if _RNG is not None:
        return _RNG
    with _LOCK:
        if _RNG is None:
            _RNG = np.random.default_rng(_SEED)
    return _RNG

def spawn_numpy_rng() -> np.random.Generator:
    """Return an independent Generator seeded from a draw of the global one."""
    parent = get_numpy_rng()
    with _LOCK:
        seed = int(parent.integers(0, 2**63 - 1))
    return np.random.default_rng(seed)

def reseed_all(seed: int) -> np.random.Generator:
    """Reseed the global NumPy generator and return it."""
    global _RNG, _SEED
    with _LOCK:
        _SEED   = seed
        _RNG    = np.random.default_rng(seed)
    return _RNG

# ----------------------------------------------------------------

__all__ = [
    "get_logger",
    "get_numpy_rng",
    "spawn_numpy_rng",
    "reseed_all",
]

# ----------------------------------------------------------------
#! End of QHam global singletons
