"""
Bond structure of the lattice collaborators.
"""

import pytest

from QHam.lattices import HoneycombLattice, LatticeBC, LatticeType, SquareLattice

##########################################################################################

def test_periodic_chain_bonds():
    lat = SquareLattice(dim=1, lx=4, bc="pbc")
    assert lat.ns == 4
    assert lat.bc == LatticeBC.PBC
    assert lat.typ == LatticeType.SQUARE
    assert lat.nn_bonds() == [(0, 1), (1, 2), (2, 3), (3, 0)]
    assert lat.nnn_bonds() == [(0, 2), (1, 3)]
    assert lat.get_nn_forward(3) == [0]
    assert sorted(lat.get_nn(0)) == [1, 3]
    assert lat.cardinality == 2

def test_open_chain_has_no_wrapping_bonds():
    lat = SquareLattice(dim=1, lx=4, bc=LatticeBC.OBC)
    assert lat.nn_bonds() == [(0, 1), (1, 2), (2, 3)]
    assert lat.nnn_bonds() == [(0, 2), (1, 3)]
    assert lat.get_nn_forward_num(3) == 0
    assert lat.get_bc_str() == "OBC"

def test_two_site_periodic_chain_stores_the_bond_once():
    lat = SquareLattice(dim=1, lx=2, bc="pbc")
    assert lat.nn_bonds() == [(0, 1)]
    assert lat.nnn_bonds() == []

def test_square_lattice_sites_and_bond_labels():
    lat = SquareLattice(dim=2, lx=3, ly=3, bc="pbc")
    assert lat.ns == 9
    assert len(lat.nn_bonds()) == 18
    assert lat.bond_type(0, 1) == "x"
    assert lat.bond_type(0, 3) == "y"
    assert lat.bond_type(0, 4) is None

def test_chain_alternates_kitaev_labels():
    lat = SquareLattice(dim=1, lx=4, bc="pbc")
    assert [lat.bond_type(i, j) for i, j in lat.nn_bonds()] == ["x", "y", "x", "y"]

def test_honeycomb_bonds_carry_three_labels():
    lat = HoneycombLattice(lx=2, ly=1, bc="pbc")
    assert lat.ns == 4
    assert lat.typ == LatticeType.HONEYCOMB
    assert sorted(tuple(sorted(b)) for b in lat.nn_bonds()) == [(0, 1), (0, 3), (1, 2), (2, 3)]
    assert lat.bond_type(0, 1) == "z"
    assert lat.bond_type(1, 2) == "x"
    assert lat.bond_type(3, 0) == "x"

def test_invalid_sizes_and_boundaries():
    with pytest.raises(ValueError):
        SquareLattice(dim=1, lx=0)
    with pytest.raises(ValueError):
        SquareLattice(dim=3, lx=2)
    with pytest.raises(ValueError):
        LatticeBC.from_str("twisted")

# ----------------------------------------------------------------------------------------------------
#! End of test_lattices.py
# ----------------------------------------------------------------------------------------------------
