"""
Square lattice in one or two dimensions.

Sites are numbered ``i = x + lx * y``. Nearest-neighbour bonds point in the
positive ``x`` and ``y`` directions, next-nearest ones along the diagonals
(or two sites apart in 1D). Bond labels: in 1D the bonds alternate
``x``/``y`` (Kitaev chain), in 2D horizontal bonds are ``x`` and vertical
ones ``y``.

---------------------------------------------------
File    : QHam/lattices/square.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from typing import Optional

from QHam.lattices.lattice import Lattice, LatticeBC, LatticeType

####################################################################################################

class SquareLattice(Lattice):
    '''
    Square lattice (chain for ``dim=1``).
    '''

    def __init__(self, dim: int = 1, lx: int = 4, ly: int = 1, bc = LatticeBC.PBC, **kwargs):
        if dim not in (1, 2):
            raise ValueError(f"SquareLattice supports dim 1 or 2, got {dim}.")
        if dim == 1:
            ly = 1
        super().__init__(dim=dim, lx=lx, ly=ly, bc=bc)

    def _count_sites(self) -> int:
        return self._lx * self._ly

    # ----------------------------------------------------------------------------------------------

    def _site(self, x: int, y: int) -> Optional[int]:
        ''' Site index of (x, y) after applying the boundary conditions, None if outside. '''
        if self._bc == LatticeBC.PBC:
            return (x % self._lx) + self._lx * (y % self._ly)
        if 0 <= x < self._lx and 0 <= y < self._ly:
            return x + self._lx * y
        return None

    def _build_bonds(self) -> None:
        # nearest neighbours first so they take precedence on tiny periodic lattices
        for y in range(self._ly):
            for x in range(self._lx):
                i = x + self._lx * y
                j = self._site(x + 1, y)
                if j is not None and not (self._bc == LatticeBC.PBC and self._lx == 1):
                    kind = ("x" if x % 2 == 0 else "y") if self._dim == 1 else "x"
                    self._add_bond(i, j, kind=kind)
                if self._dim == 2:
                    j = self._site(x, y + 1)
                    if j is not None:
                        self._add_bond(i, j, kind="y")

        for y in range(self._ly):
            for x in range(self._lx):
                i = x + self._lx * y
                if self._dim == 1:
                    j = self._site(x + 2, y)
                    if j is not None:
                        self._add_bond(i, j, nnn=True)
                else:
                    for dx in (1, -1):
                        j = self._site(x + dx, y + 1)
                        if j is not None:
                            self._add_bond(i, j, nnn=True)

    @property
    def typ(self) -> LatticeType:
        return LatticeType.SQUARE

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
