"""
Minimal lattice geometry used by the interacting models.

A lattice only answers read-only questions: the number of sites, the boundary
condition and which pairs of sites are (next-)nearest neighbours. It is shared
by reference between many Hamiltonians and must outlive all of them.

---------------------------------------------------
File    : QHam/lattices/lattice.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, unique
from typing import Dict, List, Optional, Tuple

####################################################################################################

@unique
class LatticeBC(Enum):
    '''
    Boundary conditions.
    '''
    PBC = 0     # periodic
    OBC = 1     # open

    @staticmethod
    def from_str(bc) -> "LatticeBC":
        if isinstance(bc, LatticeBC):
            return bc
        try:
            return LatticeBC[str(bc).upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown boundary condition: {bc}") from exc

@unique
class LatticeType(Enum):
    SQUARE      = 0
    HONEYCOMB   = 1

####################################################################################################

class Lattice(ABC):
    '''
    Abstract lattice. Subclasses fill the forward bond lists in
    :meth:`_build_bonds`; every bond is stored once, ``i != j``.
    '''

    def __init__(self, dim: int, lx: int, ly: int = 1, lz: int = 1, bc = LatticeBC.PBC):
        if lx < 1 or ly < 1 or lz < 1:
            raise ValueError(f"Lattice sizes must be positive, got lx={lx}, ly={ly}, lz={lz}.")
        self._dim           = dim
        self._lx            = lx
        self._ly            = ly
        self._lz            = lz
        self._bc            = LatticeBC.from_str(bc)
        self._ns            = self._count_sites()
        self._nn_forward    : List[List[int]]               = [[] for _ in range(self._ns)]
        self._nnn_forward   : List[List[int]]               = [[] for _ in range(self._ns)]
        self._bond_types    : Dict[Tuple[int, int], str]    = {}
        self._nn_set                                        = set()
        self._nnn_set                                       = set()
        self._build_bonds()

    # ----------------------------------------------------------------------------------------------

    @abstractmethod
    def _count_sites(self) -> int:
        pass

    @abstractmethod
    def _build_bonds(self) -> None:
        pass

    def _add_bond(self, i: int, j: int, nnn: bool = False, kind: Optional[str] = None) -> None:
        ''' Register a forward bond ``i -> j`` once. '''
        if i == j:
            return
        key = (min(i, j), max(i, j))
        if key in self._nn_set or key in self._nnn_set:
            return
        if nnn:
            self._nnn_set.add(key)
            self._nnn_forward[i].append(j)
        else:
            self._nn_set.add(key)
            self._nn_forward[i].append(j)
            self._bond_types[key] = kind

    def _iter_pairs(self, nnn: bool):
        bonds = self._nnn_forward if nnn else self._nn_forward
        for i, js in enumerate(bonds):
            for j in js:
                yield i, j

    # ----------------------------------------------------------------------------------------------
    #! Properties
    # ----------------------------------------------------------------------------------------------

    @property
    def ns(self) -> int:            return self._ns
    @property
    def Ns(self) -> int:            return self._ns
    @property
    def dim(self) -> int:           return self._dim
    @property
    def lx(self) -> int:            return self._lx
    @property
    def ly(self) -> int:            return self._ly
    @property
    def lz(self) -> int:            return self._lz
    @property
    def bc(self) -> LatticeBC:      return self._bc

    @property
    @abstractmethod
    def typ(self) -> LatticeType:
        pass

    @property
    def cardinality(self) -> int:
        ''' Maximal number of nearest neighbours of a site. '''
        return max((len(self.get_nn(i)) for i in range(self._ns)), default=0)

    # ----------------------------------------------------------------------------------------------
    #! Neighbours
    # ----------------------------------------------------------------------------------------------

    def get_nn_forward(self, i: int, num: Optional[int] = None):
        '''
        Forward nearest neighbours of site ``i`` (each bond appears once
        over the whole lattice). With ``num`` returns the ``num``-th one.
        '''
        if num is None:
            return list(self._nn_forward[i])
        return self._nn_forward[i][num]

    def get_nn_forward_num(self, i: int) -> int:
        return len(self._nn_forward[i])

    def get_nnn_forward(self, i: int, num: Optional[int] = None):
        if num is None:
            return list(self._nnn_forward[i])
        return self._nnn_forward[i][num]

    def get_nnn_forward_num(self, i: int) -> int:
        return len(self._nnn_forward[i])

    def get_nn(self, i: int) -> List[int]:
        ''' All nearest neighbours of ``i``. '''
        out = list(self._nn_forward[i])
        out.extend(j for j, js in enumerate(self._nn_forward) if i in js)
        return out

    def nn_bonds(self) -> List[Tuple[int, int]]:
        return list(self._iter_pairs(False))

    def nnn_bonds(self) -> List[Tuple[int, int]]:
        return list(self._iter_pairs(True))

    def bond_type(self, i: int, j: int) -> Optional[str]:
        ''' Kitaev-like bond label ('x', 'y' or 'z') of a nearest-neighbour bond. '''
        return self._bond_types.get((min(i, j), max(i, j)))

    # ----------------------------------------------------------------------------------------------

    def get_bc_str(self) -> str:
        return self._bc.name

    def __str__(self) -> str:
        sizes = ",".join(f"L{a}={v}" for a, v in list(zip("xyz", (self._lx, self._ly, self._lz)))[:self._dim])
        return f"{self.typ.name},{self._dim}D,{sizes},{self._bc.name}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
