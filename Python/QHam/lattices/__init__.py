"""
Lattice geometry collaborators.
"""

from QHam.lattices.lattice import Lattice, LatticeBC, LatticeType
from QHam.lattices.square import SquareLattice
from QHam.lattices.honeycomb import HoneycombLattice

__all__ = ["Lattice", "LatticeBC", "LatticeType", "SquareLattice", "HoneycombLattice"]
