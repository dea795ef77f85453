"""
Binary encoding of many-body basis states.

A configuration of ``ns`` sites is stored as an integer whose low ``ns`` bits
are the site occupations: bit ``i`` holds the occupation of site ``i``
(for spin-1/2 systems, a set bit is a spin up). The map between the integer
and the occupation vector is a bijection for every ``ns <= MAX_BITS``.

The ``*_jit`` kernels are used inside numba compiled matrix builders, the
plain functions are their Python facing counterparts.

---------------------------------------------------
File    : QHam/common/binary.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from typing import Sequence, Union

import numba
import numpy as np

MAX_BITS    = 63    # states are stored in signed 64-bit integers

####################################################################################################
#! JIT kernels
####################################################################################################

@numba.njit(cache=True)
def popcount_jit(x: np.int64) -> np.int64:
    ''' Number of set bits (occupied sites) of the state. '''
    c = np.int64(0)
    while x:
        x &= x - 1
        c += 1
    return c

@numba.njit(cache=True)
def check_jit(state: np.int64, site: np.int64) -> bool:
    ''' Is the site occupied? '''
    return (state >> site) & 1 == 1

@numba.njit(cache=True)
def flip_jit(state: np.int64, site: np.int64) -> np.int64:
    return state ^ (np.int64(1) << site)

@numba.njit(cache=True)
def flip_two_jit(state: np.int64, i: np.int64, j: np.int64) -> np.int64:
    return state ^ ((np.int64(1) << i) | (np.int64(1) << j))

@numba.njit(cache=True)
def spin_jit(state: np.int64, site: np.int64) -> np.float64:
    ''' Pauli sigma^z eigenvalue of the site: +1 for a set bit, -1 otherwise. '''
    return 1.0 if (state >> site) & 1 else -1.0

####################################################################################################
#! Python interface
####################################################################################################

def _check_ns(ns: int) -> None:
    if ns < 0 or ns > MAX_BITS:
        raise ValueError(f"Number of sites must be in [0, {MAX_BITS}], got {ns}.")

def popcount(state: Union[int, np.ndarray]) -> Union[int, np.ndarray]:
    '''
    Number of occupied sites of a state. Works for a single integer and,
    elementwise, for integer arrays.
    '''
    if isinstance(state, np.ndarray):
        out = np.zeros(state.shape, dtype=np.int64)
        x   = state.astype(np.int64, copy=True)
        while np.any(x):
            out += (x & 1)
            x  >>= 1
        return out
    return bin(int(state)).count("1")

def check(state: int, site: int) -> bool:
    ''' Occupation of a single site. '''
    return (int(state) >> site) & 1 == 1

def flip(state: int, site: int) -> int:
    return int(state) ^ (1 << site)

def flip_two(state: int, i: int, j: int) -> int:
    return int(state) ^ ((1 << i) | (1 << j))

def base2int(occupations: Sequence[int]) -> int:
    '''
    Encode the occupation vector as an integer, occupation ``occupations[i]``
    lands on bit ``i``.

    Parameters:
        occupations :
            sequence of 0/1 (or booleans)
    Returns:
        integer state
    '''
    _check_ns(len(occupations))
    state = 0
    for i, occ in enumerate(occupations):
        if occ not in (0, 1, True, False):
            raise ValueError(f"Occupation at site {i} must be 0 or 1, got {occ}.")
        if occ:
            state |= (1 << i)
    return state

def int2base(state: int, ns: int) -> np.ndarray:
    '''
    Decode the integer state into the occupation vector of length ``ns``.
    Inverse of :func:`base2int`.
    '''
    _check_ns(ns)
    state = int(state)
    if state < 0 or state >> ns:
        raise ValueError(f"State {state} does not fit into {ns} sites.")
    return np.array([(state >> i) & 1 for i in range(ns)], dtype=np.int8)

def int2binstr(state: int, ns: int) -> str:
    ''' Bit string of the state, most significant (last) site first. '''
    return format(int(state), f"0{ns}b") if ns > 0 else ""

# aliases following the encoder contract
encode = base2int
decode = int2base

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
