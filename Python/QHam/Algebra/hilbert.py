"""
Hilbert space of a many-body (or single-particle) system and the symmetry
sector builder.

The full many-body space of ``ns`` two-level sites contains the states
``0 .. 2^ns - 1``. A set of global symmetries restricts it to a *reduced
basis*: the states accepted by every generator, kept in ascending numeric
order and indexed contiguously from zero.

Building a reduced basis visits every configuration, which costs
``O(2^ns)`` time and ``O(|basis|)`` memory. This is intrinsic to the problem;
callers choose ``ns`` accordingly.

---------------------------------------------------
File    : QHam/Algebra/hilbert.py
Author  : Maksymilian Kliczkowski
Date    : 2025-02-01
---------------------------------------------------
"""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List, Optional, Union

import numba
import numpy as np

try:
    from QHam.Algebra.globals import (
        GlobalSymmetry,
        GlobalSymmetries,
        GlobalSymmetryCombination,
        to_codes,
        violates_global_syms,
    )
    from QHam.common.binary import MAX_BITS
    if TYPE_CHECKING:
        from QHam.common.flog import Logger
        from QHam.lattices.lattice import Lattice
        from QHam.Algebra.hilbert_config import HilbertConfig
except ImportError as e:
    raise ImportError("Failed to import QHam modules required by the Hilbert space.") from e

MAX_SITES_SECTOR = 40   # enumeration of 2^ns states above this is not attempted

####################################################################################################
#! Kernels
####################################################################################################

@numba.njit(cache=True)
def _count_sector_jit(nhfull: np.int64, codes: np.ndarray, values: np.ndarray) -> np.int64:
    count = np.int64(0)
    for state in range(nhfull):
        if not violates_global_syms(np.int64(state), codes, values):
            count += 1
    return count

@numba.njit(cache=True)
def _fill_sector_jit(nhfull: np.int64, codes: np.ndarray, values: np.ndarray, out: np.ndarray) -> None:
    k = 0
    for state in range(nhfull):
        if not violates_global_syms(np.int64(state), codes, values):
            out[k]  = state
            k      += 1

@numba.njit(cache=True)
def find_index_jit(mapping: np.ndarray, state: np.int64) -> np.int64:
    '''
    Position of ``state`` in the ascending ``mapping`` or -1.
    '''
    n = mapping.shape[0]
    lo = 0
    hi = n
    while lo < hi:
        mid = (lo + hi) // 2
        if mapping[mid] < state:
            lo = mid + 1
        else:
            hi = mid
    if lo < n and mapping[lo] == state:
        return lo
    return -1

####################################################################################################
#! Reduced basis
####################################################################################################

@dataclass(frozen=True)
class ReducedBasis:
    '''
    States accepted by a symmetry combination, in ascending order, together
    with the reverse lookup (binary search). Immutable after construction.
    '''
    ns      : int
    mapping : np.ndarray

    def __post_init__(self):
        self.mapping.setflags(write=False)

    def __len__(self) -> int:
        return int(self.mapping.shape[0])

    def __iter__(self) -> Iterator[int]:
        return (int(s) for s in self.mapping)

    def __contains__(self, state: int) -> bool:
        return self.index(state) >= 0

    def index(self, state: int) -> int:
        ''' Position of the state in the basis or -1 if it is not there. '''
        pos = int(np.searchsorted(self.mapping, state))
        if pos < len(self) and int(self.mapping[pos]) == int(state):
            return pos
        return -1

    def state(self, idx: int) -> int:
        if idx < 0 or idx >= len(self):
            raise IndexError(f"Index {idx} outside of the reduced basis of size {len(self)}.")
        return int(self.mapping[idx])

def build_reduced_basis(ns: int, syms: Union[GlobalSymmetryCombination, Iterable[GlobalSymmetry], None]) -> ReducedBasis:
    '''
    Enumerate ``0 .. 2^ns - 1`` in ascending order and keep the states
    accepted by every generator.

    Generators with a known name and canonical predicate (U1, Z2 parity) are
    checked in a compiled loop; any generator with a custom predicate makes
    the whole combination go through the Python predicates, in order.

    Parameters:
        ns :
            number of sites
        syms :
            the symmetry combination (or an iterable of generators)
    Returns:
        ReducedBasis
    '''
    if ns < 0 or ns > min(MAX_SITES_SECTOR, MAX_BITS):
        raise ValueError(f"Cannot enumerate the configuration space of {ns} sites (limit {min(MAX_SITES_SECTOR, MAX_BITS)}).")

    comb = syms if isinstance(syms, GlobalSymmetryCombination) else GlobalSymmetryCombination(syms)
    comb.validate()
    nhfull = 1 << ns

    if len(comb) == 0:
        mapping = np.arange(nhfull, dtype=np.int64)
    elif comb.jittable:
        codes, values   = to_codes(comb)
        count           = _count_sector_jit(np.int64(nhfull), codes, values)
        mapping         = np.empty(count, dtype=np.int64)
        _fill_sector_jit(np.int64(nhfull), codes, values, mapping)
    else:
        mapping = np.fromiter((s for s in range(nhfull) if comb(s)), dtype=np.int64)
    return ReducedBasis(ns=ns, mapping=mapping)

####################################################################################################
#! Hilbert space
####################################################################################################

class HilbertSpace:
    '''
    Hilbert space of ``ns`` sites, optionally restricted by global symmetries.

    For a many-body space the dimension is ``2^ns`` (full) or the size of the
    reduced basis. A quadratic (single-particle) space has dimension ``ns``.
    '''

    _ERR_NS_NOT_PROVIDED    = "Either 'ns' or a lattice must be provided to build the Hilbert space."
    _ERR_QUADRATIC_SYMS     = "Global symmetries restrict many-body spaces only."

    def __init__(self,
                ns              : Optional[int]                                                         = None,
                lattice         : Optional["Lattice"]                                                   = None,
                global_syms     : Optional[Union[GlobalSymmetryCombination, Iterable[GlobalSymmetry]]]  = None,
                is_manybody     : bool                                                                  = True,
                dtype                                                                                   = np.float64,
                logger          : Optional["Logger"]                                                    = None,
                state_filter    : Optional[Callable[[int], bool]]                                       = None,
                **kwargs):
        '''
        Parameters:
            ns :
                number of sites (inferred from the lattice when omitted)
            lattice :
                shared lattice, read only
            global_syms :
                generators restricting the space, checked left to right
            is_manybody :
                many-body (``2^ns``) or single-particle (``ns``) space
            dtype :
                scalar type of operators acting on the space
            logger :
                logging collaborator, the global logger when omitted
            state_filter :
                extra predicate on states, appended as a generator named ``Other``
        '''
        if lattice is not None:
            if ns is not None and ns != lattice.ns:
                raise ValueError(f"Ns mismatch: {ns} != {lattice.ns}")
            ns = lattice.ns
        if ns is None:
            raise ValueError(HilbertSpace._ERR_NS_NOT_PROVIDED)

        self._ns            = int(ns)
        self._lattice       = lattice
        self._dtype         = dtype
        self._logger        = self._check_logger(logger)
        self._is_many_body  = is_manybody
        self._is_quadratic  = not is_manybody

        syms                = GlobalSymmetryCombination(global_syms)
        if state_filter is not None:
            flt = GlobalSymmetry(lat=lattice, ns=self._ns, name=GlobalSymmetries.Other)
            flt.set_fun(lambda state, _val: bool(state_filter(state)))
            syms.append(flt)
        if self._is_quadratic and len(syms) > 0:
            raise ValueError(HilbertSpace._ERR_QUADRATIC_SYMS)
        self._global_syms   = syms

        self._basis         : Optional[ReducedBasis] = None
        if self._is_quadratic:
            self._nhfull    = self._ns
            self._nh        = self._ns
        else:
            self._nhfull    = 1 << self._ns
            if len(syms) > 0:
                self._basis = build_reduced_basis(self._ns, syms)
                self._nh    = len(self._basis)
                self._log(f"Reduced basis with {self._nh}/{self._nhfull} states for {syms}.", lvl=2, log='debug')
            else:
                self._nh    = self._nhfull

    # --------------------------------------------------------------------------------------------------

    @classmethod
    def from_config(cls, config: "HilbertConfig") -> "HilbertSpace":
        return config.build()

    def _check_logger(self, logger: Optional["Logger"]) -> "Logger":
        if logger is None:
            from QHam.qham_globals import get_logger
            return get_logger()
        return logger

    def _log(self, msg: str, log: Union[int, str] = 'info', lvl: int = 0, color: str = "white", append_msg: bool = True):
        """Log a message."""
        if self._logger is None:
            return
        if append_msg:
            msg = f"[{self.__class__.__name__}] {msg}"
        msg = self._logger.colorize(msg, color)
        self._logger.say(msg, log=log, lvl=lvl)

    # --------------------------------------------------------------------------------------------------
    #! Properties
    # --------------------------------------------------------------------------------------------------

    @property
    def ns(self) -> int:                                    return self._ns
    @property
    def Ns(self) -> int:                                    return self._ns
    @property
    def nh(self) -> int:                                    return self._nh
    @property
    def Nh(self) -> int:                                    return self._nh
    @property
    def nhfull(self) -> int:                                return self._nhfull
    @property
    def lattice(self) -> Optional["Lattice"]:               return self._lattice
    @property
    def dtype(self):                                        return self._dtype
    @property
    def logger(self) -> "Logger":                           return self._logger
    @property
    def global_syms(self) -> GlobalSymmetryCombination:     return self._global_syms
    @property
    def reduced_basis(self) -> Optional[ReducedBasis]:      return self._basis
    @property
    def is_manybody(self) -> bool:                          return self._is_many_body
    @property
    def is_quadratic(self) -> bool:                         return self._is_quadratic

    @property
    def modifies(self) -> bool:
        ''' True when the space is a proper subset of the full space. '''
        return self._basis is not None

    @property
    def mapping(self) -> np.ndarray:
        '''
        Ascending array of kept states, empty for an unrestricted space.
        Kernels take :attr:`modifies` alongside, an empty sector is empty too.
        '''
        if self._basis is None:
            return np.zeros(0, dtype=np.int64)
        return self._basis.mapping

    # --------------------------------------------------------------------------------------------------
    #! Index <-> state
    # --------------------------------------------------------------------------------------------------

    def find_index(self, state: int) -> int:
        ''' Index of a state, -1 when the state does not belong to the space. '''
        if self._basis is not None:
            return self._basis.index(state)
        return int(state) if 0 <= int(state) < self._nh else -1

    def get_state(self, idx: int) -> int:
        if self._basis is not None:
            return self._basis.state(idx)
        if idx < 0 or idx >= self._nh:
            raise IndexError(f"Index {idx} outside of the Hilbert space of size {self._nh}.")
        return int(idx)

    def states(self) -> np.ndarray:
        ''' All states of the space in index order. '''
        if self._basis is not None:
            return np.array(self._basis.mapping)
        return np.arange(self._nh, dtype=np.int64)

    def __len__(self) -> int:
        return self._nh

    def __contains__(self, state: int) -> bool:
        return self.find_index(state) >= 0

    def copy(self) -> "HilbertSpace":
        ''' Shallow copy sharing the lattice, the logger and the immutable basis. '''
        return _copy.copy(self)

    # --------------------------------------------------------------------------------------------------

    def __str__(self) -> str:
        kind = "many-body" if self._is_many_body else "single-particle"
        syms = f",syms={[str(s) for s in self._global_syms]}" if len(self._global_syms) else ""
        return f"HilbertSpace({kind},Ns={self._ns},Nh={self._nh}{syms})"

    def __repr__(self) -> str:
        return self.__str__()

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
