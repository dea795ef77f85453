"""
Honeycomb lattice with Kitaev bond labels.

The lattice has ``lx * ly`` unit cells with two sites each. Cell ``(x, y)``
holds sites ``A = 2 (x + lx y)`` and ``B = A + 1``. Every ``A`` site has three
bonds: ``z`` to ``B`` of its own cell, ``x`` to ``B`` of cell ``(x - 1, y)``
and ``y`` to ``B`` of cell ``(x, y - 1)``.

---------------------------------------------------
File    : QHam/lattices/honeycomb.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from typing import Optional

from QHam.lattices.lattice import Lattice, LatticeBC, LatticeType

####################################################################################################

class HoneycombLattice(Lattice):
    '''
    Two dimensional honeycomb lattice.
    '''

    def __init__(self, lx: int = 2, ly: int = 1, bc = LatticeBC.PBC, **kwargs):
        super().__init__(dim=2, lx=lx, ly=ly, bc=bc)

    def _count_sites(self) -> int:
        return 2 * self._lx * self._ly

    def _cell(self, x: int, y: int) -> Optional[int]:
        if self._bc == LatticeBC.PBC:
            return (x % self._lx) + self._lx * (y % self._ly)
        if 0 <= x < self._lx and 0 <= y < self._ly:
            return x + self._lx * y
        return None

    def _build_bonds(self) -> None:
        for y in range(self._ly):
            for x in range(self._lx):
                a = 2 * (x + self._lx * y)
                self._add_bond(a, a + 1, kind="z")
                for kind, (dx, dy) in (("x", (-1, 0)), ("y", (0, -1))):
                    cell = self._cell(x + dx, y + dy)
                    if cell is not None:
                        self._add_bond(a, 2 * cell + 1, kind=kind)

    @property
    def typ(self) -> LatticeType:
        return LatticeType.HONEYCOMB

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
