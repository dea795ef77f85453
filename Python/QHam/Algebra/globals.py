"""
file: Algebra/globals.py
Contains the GlobalSymmetry class for defining and checking global symmetries on states,
and the GlobalSymmetryCombination used to restrict the Hilbert space by several of them.
"""

# Import the necessary modules
from __future__ import annotations

from abc import ABC
from enum import Enum, unique
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List, Optional, Tuple, Union

import numba
import numpy as np

try:
    from QHam.common.binary import popcount, popcount_jit
    from QHam.common.errors import SymmetryConfigurationError
    if TYPE_CHECKING:
        from QHam.lattices.lattice import Lattice
except ImportError as e:
    raise ImportError(
        "Failed to import QHam.common modules. Ensure QHam package is correctly installed."
    ) from e

# ---------------------------

@unique
class GlobalSymmetries(Enum):
    '''
    Names of the global symmetry generators. Generators named ``Other``
    carry an arbitrary predicate supplied by the user.
    '''
    Other       = 0
    U1          = 1
    Z2_PARITY   = 2

# ---------------------------

class GlobalSymmetry(ABC):
    """
    GlobalSymmetry represents a global symmetry check on a state.
    It stores:
        - a lattice (lat)   (if needed),
        - a symmetry value  (val),
        - a symmetry name   (an element of GlobalSymmetries),
        - and a checking function (check) that takes (state, val) and returns a bool (True if the state satisfies the symmetry).

    The checking function must be pure: the same state and value always give the same answer.
    """

    _ERR_NO_CHECK = "No symmetry check function has been set!"

    def __init__(
        self,
        lat     : Optional["Lattice"]   = None,
        ns      : Optional[int]         = None,
        val     : float                 = 0.0,
        name    : GlobalSymmetries      = GlobalSymmetries.Other,
    ):
        """
        Initialize the GlobalSymmetry object.
        Parameters:
        - lat : Optional[Lattice]     : The lattice associated with the symmetry.
        - ns  : Optional[int]         : The number of sites (if no lattice is given).
        - val : float                 : The symmetry value (default is 0.0).
        - name: GlobalSymmetries      : The name of the symmetry (default is GlobalSymmetries.Other).
        """
        self._lat = lat
        if lat is not None:
            ns = lat.ns
        elif ns is None:
            raise ValueError("Either the lattice or the number of sites must be provided!")

        self.ns     = ns
        self.val    = val
        self.name   = name
        self.check  : Optional[Callable[[Union[int, np.ndarray], float], bool]] = None

    # ---------- SETTERS -----------

    def set_fun(self, fun: Callable[[Union[int, np.ndarray], float], bool]) -> None:
        """Set the checking function, replacing the previous one."""
        if not callable(fun):
            raise TypeError("The symmetry check must be callable.")
        self.check = fun

    set_predicate = set_fun

    def set_val(self, val: float) -> None:
        """Set the target value of the conserved quantity."""
        self.val = val

    set_target = set_val

    def set_name(self, name: GlobalSymmetries) -> None:
        """Set the name of the symmetry."""
        self.name = name

    # ---------- GETTERS -----------

    def get_name(self) -> GlobalSymmetries:
        """Return the symmetry name (enum element)."""
        return self.name

    def get_name_str(self) -> str:
        """Return the string representation of the symmetry name."""
        return self.name.name

    def get_val(self) -> float:
        """Return the symmetry value."""
        return self.val

    @property
    def lat(self) -> Optional["Lattice"]:
        """Return the lattice associated with the symmetry."""
        return self._lat

    @property
    def ns(self) -> int:
        """Return the number of sites."""
        return self._ns

    @ns.setter
    def ns(self, ns: int) -> None:
        self._ns = ns

    @property
    def configured(self) -> bool:
        return self.check is not None

    # ---------- CHECKER -----------

    def evaluate(self, state: Union[int, np.ndarray]) -> bool:
        """
        Apply the checking function to the state.
        Raises a SymmetryConfigurationError if no check function is set.
        """
        if self.check is None:
            raise SymmetryConfigurationError(f"{self._ERR_NO_CHECK} ({self.get_name_str()})")
        return bool(self.check(state, self.val))

    def __call__(self, state: Union[int, np.ndarray]) -> bool:
        return self.evaluate(state)

    def check_state(self, state: Union[int, np.ndarray], out_cond: bool) -> bool:
        """
        Returns True if the state satisfies the symmetry and the additional condition out_cond.
        """
        return self.evaluate(state) and out_cond

    def __repr__(self) -> str:
        return f"GlobalSymmetry({self.get_name_str()},val={self.val})"

    def __str__(self) -> str:
        return f"{self.get_name_str()}={self.val}"

# ---------------------------
#! Combination of generators
# ---------------------------

class GlobalSymmetryCombination:
    '''
    Ordered list of global symmetries. A state belongs to the combination
    when every generator accepts it; generators are evaluated left to right
    and the evaluation stops at the first rejection. An empty combination
    accepts every state.
    '''

    def __init__(self, syms: Optional[Iterable[GlobalSymmetry]] = None):
        self._syms: List[GlobalSymmetry] = list(syms) if syms is not None else []

    def append(self, sym: GlobalSymmetry) -> "GlobalSymmetryCombination":
        self._syms.append(sym)
        return self

    def __call__(self, state: Union[int, np.ndarray]) -> bool:
        for sym in self._syms:
            if not sym.evaluate(state):
                return False
        return True

    accepts = __call__

    def __iter__(self) -> Iterator[GlobalSymmetry]:
        return iter(self._syms)

    def __len__(self) -> int:
        return len(self._syms)

    def __getitem__(self, idx: int) -> GlobalSymmetry:
        return self._syms[idx]

    @property
    def symmetries(self) -> List[GlobalSymmetry]:
        return list(self._syms)

    @property
    def jittable(self) -> bool:
        ''' True if every generator has a known name and its canonical predicate. '''
        return all(s.name != GlobalSymmetries.Other and s.check is _CANONICAL.get(s.name) for s in self._syms)

    def validate(self) -> None:
        ''' Fail early if any generator is missing its predicate. '''
        for sym in self._syms:
            if sym.check is None:
                raise SymmetryConfigurationError(f"{GlobalSymmetry._ERR_NO_CHECK} ({sym.get_name_str()})")

    def __repr__(self) -> str:
        return f"GlobalSymmetryCombination([{','.join(str(s) for s in self._syms)}])"

# ---------------------------
#! Global U(1) Symmetry
# ---------------------------

def u1_sym(state: Union[int, np.ndarray], val: float) -> bool:
    """
    Global U(1) symmetry check.

    For a given state, returns True if the popcount (number of 1-bits or up spins)
    equals the given value 'val'. This works for both integer states and array-like states.
    """
    return popcount(state) == val

def get_u1_sym(lat: Optional["Lattice"] = None, val: float = 0.0, ns: Optional[int] = None) -> GlobalSymmetry:
    """
    Factory function that creates a U(1) global symmetry object.

    Parameters:
        lat: Lattice on which the symmetry is defined.
        val: The symmetry value (typically the required number of 1-bits).
        ns : Number of sites, used when no lattice is given.

    Returns:
        An instance of GlobalSymmetry with name U1, value val, and the checking function set to u1_sym.
    """
    sym = GlobalSymmetry(lat=lat, ns=ns, val=val, name=GlobalSymmetries.U1)
    sym.set_fun(u1_sym)
    return sym

# --------------------------
#! Global Z2 Symmetry
# --------------------------

def z2_parity_sym(state: Union[int, np.ndarray], val: float) -> bool:
    """
    Global Z2 parity symmetry.

    Checks (-1)^N == val, where N = popcount(state).

    Parameters
    ----------
    state : int or ndarray
        Integer-encoded many-body state
    val : float
        Parity sector: +1 (even), -1 (odd)
    """
    parity = popcount(state) & 1
    return (1 if parity == 0 else -1) == int(val)

def get_z2_parity_sym(lat: Optional["Lattice"] = None, val: int = 1, ns: Optional[int] = None) -> GlobalSymmetry:
    """
    Factory for global Z2 parity symmetry.

    Parameters
    ----------
    lat : Lattice
        Lattice (used only for ns)
    val : int
        Parity sector: +1 (even), -1 (odd)
    """
    if val not in (+1, -1):
        raise ValueError("Z2 parity sector must be +1 (even) or -1 (odd).")

    sym = GlobalSymmetry(lat=lat, ns=ns, val=val, name=GlobalSymmetries.Z2_PARITY)
    sym.set_fun(z2_parity_sym)
    return sym

_CANONICAL = {
    GlobalSymmetries.U1         : u1_sym,
    GlobalSymmetries.Z2_PARITY  : z2_parity_sym,
}

# --------------------------

def parse_global_syms(lat: Optional["Lattice"], sym_dict: dict, ns: Optional[int] = None) -> List[GlobalSymmetry]:
    """
    Parse a dictionary of global symmetries into a list of GlobalSymmetry objects.

    Parameters
    ----------
    lat : Lattice
        The lattice on which the symmetries are defined.
    sym_dict : dict
        Dictionary where keys are symmetry names (str) and values are symmetry values (float).
    """
    syms = []
    for name_str, val in sym_dict.items():
        name_str = name_str.upper()

        if name_str == "U1":
            sym = get_u1_sym(lat, val, ns=ns)
        elif name_str == "Z2_PARITY":
            sym = get_z2_parity_sym(lat, int(val), ns=ns)
        else:
            raise ValueError(f"Unknown global symmetry name: {name_str}")
        syms.append(sym)
    return syms

# --------------------------

def to_codes(syms: Iterable[GlobalSymmetry]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert a list of GlobalSymmetry objects into numba friendly arrays.

    Returns:
        A tuple of two 1D numpy arrays:
        - codes: Array of symmetry types (as integers) of shape (n_syms,)
        - values: Array of symmetry values of shape (n_syms,)
    """
    syms    = list(syms)
    n_syms  = len(syms)
    codes   = np.zeros((n_syms,), dtype=np.int8)
    values  = np.zeros((n_syms,), dtype=np.float64)

    for i, sym in enumerate(syms):
        codes[i]    = sym.get_name().value
        values[i]   = sym.get_val()

    return codes, values

@numba.njit(cache=True)
def violates_global_syms(state: np.int64, codes: np.ndarray, values: np.ndarray) -> bool:
    """
    Check if the given integer state violates any of the global symmetries defined by the codes.
    The symmetries are checked in order and the first violation ends the check.
    """
    n_syms = codes.shape[0]
    for i in range(n_syms):
        sym_type    = codes[i]
        sym_val     = values[i]

        if sym_type == 1:       # GlobalSymmetries.U1.value
            if popcount_jit(state) != sym_val:
                return True
        elif sym_type == 2:     # GlobalSymmetries.Z2_PARITY.value
            parity = popcount_jit(state) & 1
            if (1 if parity == 0 else -1) != int(sym_val):
                return True
    return False

# ---------------------------
#! End of globals.py
# ---------------------------
