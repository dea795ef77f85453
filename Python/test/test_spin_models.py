"""
Spin-1/2 models: matrix elements against a Kronecker-product reference,
restriction to symmetry sectors and the descriptive strings.

Author: Maksymilian Kliczkowski
"""

import numpy as np
import pytest
import scipy as sp
import scipy.sparse

from QHam.Algebra.globals import get_u1_sym
from QHam.Algebra.Hamil.hamil_jit_methods import allocate_coo, fill_spin_terms
from QHam.Algebra.hilbert import HilbertSpace, find_index_jit
from QHam.Algebra.Model.Interacting.Spin import HeisenbergKitaev, Ising, XYZ
from QHam.lattices import HoneycombLattice, SquareLattice

##########################################################################################
#! REFERENCE
##########################################################################################

# local basis (bit 0, bit 1) = (down, up)
_SX = np.array([[0, 1], [1, 0]], dtype=np.complex128)
_SY = np.array([[0, 1j], [-1j, 0]], dtype=np.complex128)
_SZ = np.array([[-1, 0], [0, 1]], dtype=np.complex128)

def _op(ns, ops):
    ''' Product of single-site operators {site: matrix}; site i is bit i of the state index. '''
    out = np.ones((1, 1), dtype=np.complex128)
    for site in reversed(range(ns)):
        out = np.kron(out, ops.get(site, np.eye(2)))
    return out

def _reference(ns, fields, bonds):
    h = np.zeros((1 << ns, 1 << ns), dtype=np.complex128)
    for site, hx, hz in fields:
        h += hx * _op(ns, {site: _SX}) + hz * _op(ns, {site: _SZ})
    for i, j, jxx, jyy, jzz in bonds:
        h += jxx * _op(ns, {i: _SX, j: _SX})
        h += jyy * _op(ns, {i: _SY, j: _SY})
        h += jzz * _op(ns, {i: _SZ, j: _SZ})
    return h

def _dense(mat):
    return mat.toarray() if hasattr(mat, "toarray") else np.asarray(mat)

##########################################################################################
#! ISING
##########################################################################################

class TestIsing:

    def test_matches_reference(self, chain4):
        J, hz, hx   = [1.0, 0.5, -0.3, 0.8], 0.4, 0.7
        model       = Ising(lattice=chain4, J=J, hz=hz, hx=hx)
        H           = _dense(model.hamiltonian())
        ref         = _reference(4,
                                [(i, hx, hz) for i in range(4)],
                                [(i, (i + 1) % 4, 0.0, 0.0, J[i]) for i in range(4)])
        np.testing.assert_allclose(H, ref.real, atol=1e-12)

    def test_is_sparse_hermitian_and_real(self, chain6):
        model = Ising(lattice=chain6, J=1.0, hz=0.5, hx=0.3)
        H     = model.hamiltonian()
        assert H.shape == (64, 64)
        assert hasattr(H, "tocsr")
        D     = H.toarray()
        np.testing.assert_allclose(D, D.T, atol=1e-14)

    def test_chain_is_built_from_the_size(self):
        model = Ising(ns=4, J=1.0, hz=0.2, hx=0.1)
        assert model.lattice is not None
        assert model.lattice.ns == 4
        assert model.hamiltonian().shape == (16, 16)

    def test_random_couplings_from_string(self):
        model = Ising(ns=5, J="r;0.5;1.5", hz=0.0, hx=0.0, seed=7)
        assert model.J.shape == (5,)
        assert np.all((model.J >= 0.5) & (model.J <= 1.5))
        with pytest.raises(ValueError):
            Ising(ns=5, J=[1.0, 2.0])

    def test_info_and_update_info(self):
        model = Ising(ns=4, J=1.0, hz=0.5, hx=0.25)
        assert model.info() == "_Ising,Ns=4,BC=PBC,_J=1,_hz=0.5,_hx=0.25"
        assert str(model) == model.info_str
        assert model.info(skip=("hx",)) == "_Ising,Ns=4,BC=PBC,_J=1,_hz=0.5"
        assert model.info(sep="-") == "-Ising,Ns=4,BC=PBC,-J=1,-hz=0.5,-hx=0.25"

        model.set_couplings(J=[1.0, 2.0, 3.0, 4.0])
        # the cached string is refreshed on request only
        assert model.info_str == "_Ising,Ns=4,BC=PBC,_J=1,_hz=0.5,_hx=0.25"
        assert model.update_info() == "_Ising,Ns=4,BC=PBC,_J=[1:4],_hz=0.5,_hx=0.25"
        assert model.info() == model.info()

    def test_diagonalize_full_and_extremal(self, chain6):
        model   = Ising(lattice=chain6, J=1.0, hz=0.3, hx=0.9)
        model.hamiltonian()
        E, V    = model.diagonalize()
        assert E.shape == (64,)
        assert V.shape == (64, 64)
        Ek, _   = model.diagonalize(k=2, which="SA")
        np.testing.assert_allclose(np.sort(Ek), E[:2], atol=1e-8)

    def test_matrix_requires_a_build(self, chain4):
        model = Ising(lattice=chain4)
        with pytest.raises(ValueError):
            _ = model.matrix
        model.hamiltonian()
        model.clear()
        assert model.hamil is None

##########################################################################################
#! XYZ
##########################################################################################

class TestXYZ:

    def test_matches_reference_with_nnn_bonds(self):
        lat     = SquareLattice(dim=1, lx=5, bc="pbc")
        model   = XYZ(lattice=lat, J1=1.0, J2=0.5, eta1=0.2, eta2=-0.4, dlt1=0.3, dlt2=0.7, hz=0.1, hx=0.2)
        H       = _dense(model.hamiltonian())
        bonds   = [(i, (i + 1) % 5, 1.0 * 0.8, 1.0 * 1.2, 0.3) for i in range(5)]
        bonds  += [(i, (i + 2) % 5, 0.5 * 1.4, 0.5 * 0.6, 0.5 * 0.7) for i in range(5)]
        ref     = _reference(5, [(i, 0.2, 0.1) for i in range(5)], bonds)
        assert np.abs(ref.imag).max() < 1e-12
        np.testing.assert_allclose(H, ref.real, atol=1e-12)

    def test_u1_sector_is_a_block_of_the_full_matrix(self, chain6):
        params  = dict(J1=1.0, J2=0.4, eta1=0.0, eta2=0.0, dlt1=0.8, dlt2=1.3, hz=0.25, hx=0.0)
        full    = _dense(XYZ(lattice=chain6, **params).hamiltonian())
        E_all   = []
        for k in range(7):
            hilbert = HilbertSpace(lattice=chain6, global_syms=[get_u1_sym(chain6, k)])
            block   = _dense(XYZ(lattice=chain6, hilbert_space=hilbert, **params).hamiltonian())
            idx     = hilbert.states()
            np.testing.assert_allclose(block, full[np.ix_(idx, idx)], atol=1e-12)
            E_all.extend(np.linalg.eigvalsh(block))
        np.testing.assert_allclose(np.sort(E_all), np.linalg.eigvalsh(full), atol=1e-10)

    def test_non_conserving_terms_are_projected(self, chain4):
        hilbert = HilbertSpace(lattice=chain4, global_syms=[get_u1_sym(chain4, 2)])
        params  = dict(J1=1.0, J2=0.0, eta1=0.5, eta2=0.0, dlt1=0.3, dlt2=0.0, hz=0.0, hx=0.6)
        full    = _dense(XYZ(lattice=chain4, **params).hamiltonian())
        block   = _dense(XYZ(lattice=chain4, hilbert_space=hilbert, **params).hamiltonian())
        idx     = hilbert.states()
        np.testing.assert_allclose(block, full[np.ix_(idx, idx)], atol=1e-12)

    def test_empty_sector_gives_an_empty_matrix(self, chain4):
        hilbert = HilbertSpace(lattice=chain4, global_syms=[get_u1_sym(chain4, 5)])
        assert hilbert.modifies
        assert hilbert.nh == 0
        model   = XYZ(lattice=chain4, hilbert_space=hilbert, hx=0.3)
        assert model.hamiltonian().shape == (0, 0)

##########################################################################################
#! KERNEL
##########################################################################################

class TestFillKernel:

    _NO_SITES   = (np.zeros(0, dtype=np.int64), np.zeros(0), np.zeros(0))
    _XX_BOND    = (np.array([0], dtype=np.int64), np.array([1], dtype=np.int64),
                   np.array([1.0]), np.array([0.0]), np.array([0.0]))

    def _fill(self, mapping, modifies, nh):
        rows, cols, vals = allocate_coo(nh, 0, 1)
        fill_spin_terms(np.asarray(mapping, dtype=np.int64), modifies, np.int64(nh),
                        *self._NO_SITES, *self._XX_BOND, rows, cols, vals)
        return sp.sparse.coo_matrix((vals, (rows, cols)), shape=(nh, nh)).toarray()

    def test_full_space_indexes_states_directly(self):
        H = self._fill([], False, 4)
        np.testing.assert_allclose(H, _reference(2, [], [(0, 1, 1.0, 0.0, 0.0)]).real)

    def test_restricted_space_reads_the_mapping(self):
        # the flip of |11> leaves the sector, only an explicit zero remains
        np.testing.assert_array_equal(self._fill([3], True, 1), [[0.0]])
        np.testing.assert_allclose(self._fill([1, 2], True, 2), [[0.0, 1.0], [1.0, 0.0]])

    def test_empty_sector_is_not_the_full_space(self):
        assert self._fill([], True, 0).shape == (0, 0)
        assert find_index_jit(np.zeros(0, dtype=np.int64), np.int64(3)) == -1

##########################################################################################
#! HEISENBERG-KITAEV
##########################################################################################

class TestHeisenbergKitaev:

    def test_honeycomb_matches_reference(self):
        lat     = HoneycombLattice(lx=2, ly=1, bc="pbc")
        model   = HeisenbergKitaev(lattice=lat, Kx=0.5, Ky=-0.2, Kz=1.5, J=0.3, dlt=0.9, hz=0.1, hx=0.05)
        H       = _dense(model.hamiltonian())
        K       = {"x": (0.5, 0.0, 0.0), "y": (0.0, -0.2, 0.0), "z": (0.0, 0.0, 1.5)}
        bonds   = []
        for i, j in lat.nn_bonds():
            kx, ky, kz = K[lat.bond_type(i, j)]
            bonds.append((i, j, 0.3 + kx, 0.3 + ky, 0.3 * 0.9 + kz))
        ref     = _reference(4, [(i, 0.05, 0.1) for i in range(4)], bonds)
        np.testing.assert_allclose(H, ref.real, atol=1e-12)
        np.testing.assert_allclose(H, H.T, atol=1e-14)

    def test_common_kitaev_coupling(self):
        lat     = HoneycombLattice(lx=2, ly=1)
        a       = HeisenbergKitaev(lattice=lat, K=0.7, J=0.0)
        b       = HeisenbergKitaev(lattice=lat, Kx=0.7, Ky=0.7, Kz=0.7, J=0.0)
        np.testing.assert_allclose(_dense(a.hamiltonian()), _dense(b.hamiltonian()))
        assert a.info().startswith("_HeiKit,Ns=4,BC=PBC,_Kx=0.7")

    def test_isotropic_heisenberg_conserves_magnetization(self, chain6):
        model   = HeisenbergKitaev(lattice=chain6, J=1.0, dlt=1.0)
        H       = _dense(model.hamiltonian())
        mz      = sum(_op(6, {i: _SZ}) for i in range(6)).real
        np.testing.assert_allclose(H @ mz - mz @ H, 0.0, atol=1e-12)

# ----------------------------------------------------------------------------------------------------
#! End of test_spin_models.py
# ----------------------------------------------------------------------------------------------------
