"""
Quadratic (single-particle) Hamiltonians.

Covers the generic term container and the SYK2, free-fermion, Aubry-Andre
and power-law random banded models.

Author: Maksymilian Kliczkowski
"""

import numpy as np
import pytest

from QHam.Algebra.hamil_quadratic import QuadraticHamiltonian, QuadraticTerm
from QHam.Algebra.hilbert import HilbertSpace
from QHam.Algebra.Model.Noninteracting import AubryAndre, FreeFermions, PowerLawRandomBanded, SYK2
from QHam.Algebra.Model.Noninteracting.plrb import plrb_envelope
from QHam.common.errors import NumericalInvariantError
from QHam.common.ran_wrapper import SharedRandomStream
from QHam.lattices import SquareLattice

##########################################################################################
#! GENERIC QUADRATIC HAMILTONIAN
##########################################################################################

class TestQuadraticHamiltonian:

    def test_terms_enter_the_matrix(self):
        q = QuadraticHamiltonian(ns=3)
        q.add_hopping(0, 1, 0.5)
        q.add_onsite(2, 1.0)
        H = q.hamiltonian()
        assert H.shape == (3, 3)
        assert H[0, 1] == H[1, 0] == 0.5
        assert H[2, 2] == 1.0
        assert len(q.terms) == 2

        q.reset_terms()
        np.testing.assert_array_equal(q.hamiltonian(), np.zeros((3, 3)))

    def test_complex_hopping_is_hermitian(self):
        q = QuadraticHamiltonian(ns=2, dtype=np.complex128)
        q.add_hopping(0, 1, 1.0 + 2.0j)
        H = q.hamiltonian()
        assert H[0, 1] == 1.0 + 2.0j
        assert H[1, 0] == 1.0 - 2.0j

    def test_invalid_terms(self):
        q = QuadraticHamiltonian(ns=3)
        with pytest.raises(ValueError):
            q.add_hopping(1, 1, 1.0)
        with pytest.raises(IndexError):
            q.add_onsite(3, 1.0)
        with pytest.raises(ValueError):
            q.add_hopping(0, 1, 1.0j)
        with pytest.raises(ValueError):
            q.add_term(QuadraticTerm.Hopping, (0,), 1.0)

    def test_from_hermitian_matrix(self):
        h = np.array([[1.0, 0.2, 0.0], [0.2, -1.0, 0.3], [0.0, 0.3, 0.5]])
        q = QuadraticHamiltonian.from_hermitian_matrix(h, constant=2.0)
        np.testing.assert_array_equal(q.hamiltonian(), h)
        # the offset does not enter the matrix
        assert q.constant == 2.0
        q.add_onsite(0, 1.0)
        assert q.hamiltonian()[0, 0] == 2.0
        with pytest.raises(ValueError):
            QuadraticHamiltonian.from_hermitian_matrix(np.array([[0.0, 1.0], [0.0, 0.0]]))

    def test_constant_offset_setter(self):
        q = QuadraticHamiltonian(ns=2, constant=1.5)
        q.constant_offset = -0.5
        assert q.constant == -0.5

##########################################################################################
#! SYK2
##########################################################################################

class TestSYK2:

    def test_symmetric_normalized_matrix(self):
        model   = SYK2(6, seed=17)
        H       = model.hamiltonian()
        assert H.shape == (6, 6)
        assert H.dtype == np.float64
        np.testing.assert_allclose(H, H.T)
        assert model.is_quadratic
        assert model.info() == "_SYK2,Ns=6,BC=PBC"

    def test_seeded_models_agree_and_different_seeds_differ(self):
        a = SYK2(5, seed=1).hamiltonian()
        b = SYK2(5, seed=1).hamiltonian()
        c = SYK2(5, seed=2).hamiltonian()
        np.testing.assert_array_equal(a, b)
        assert not np.allclose(a, c)

    def test_rebuild_draws_a_new_realization(self):
        model   = SYK2(4, seed=3)
        first   = model.hamiltonian().copy()
        second  = model.hamiltonian()
        assert not np.allclose(first, second)
        model.reseed(3)
        np.testing.assert_array_equal(model.hamiltonian(), first)

    def test_construction_paths_are_equivalent(self):
        lattice = SquareLattice(dim=1, lx=4, bc="pbc")
        hilbert = HilbertSpace(ns=4, is_manybody=False)
        by_size = SYK2(4, seed=5)
        by_lat  = SYK2(lattice, seed=5)
        by_hil  = SYK2(hilbert, seed=5)
        by_kw   = SYK2(hilbert_space=hilbert, seed=5)
        ref     = by_size.hamiltonian()
        for model in (by_lat, by_hil, by_kw):
            assert model.ns == 4
            np.testing.assert_array_equal(model.hamiltonian(), ref)
        assert by_hil.hilbert_space is hilbert
        assert SYK2(hilbert_space=hilbert, copy_hilbert=True).hilbert_space is not hilbert

    def test_complex_dtype_has_zero_imaginary_part(self):
        real    = SYK2(4, seed=8).hamiltonian()
        cpx     = SYK2(4, dtype=np.complex128, seed=8).hamiltonian()
        assert cpx.dtype == np.complex128
        np.testing.assert_array_equal(cpx.imag, 0.0)
        np.testing.assert_allclose(cpx.real, real)

    def test_gue_needs_complex_dtype(self):
        with pytest.raises(ValueError):
            SYK2(4, ensemble="GUE")
        model   = SYK2(4, ensemble="GUE", dtype=np.complex128, seed=1)
        H       = model.hamiltonian()
        np.testing.assert_allclose(H, H.conj().T)
        assert model.info() == "_SYK2,Ns=4,BC=PBC,_ens=GUE"

    def test_shared_stream(self):
        stream  = SharedRandomStream(seed=31)
        a       = SYK2(4, rng=stream)
        b       = SYK2(4, rng=stream)
        Ha, Hb  = a.hamiltonian(), b.hamiltonian()
        assert not np.allclose(Ha, Hb)
        np.testing.assert_array_equal(SYK2(4, seed=31).hamiltonian(), Ha)

    def test_strict_hermiticity_check(self):
        broken = np.array([[0.0, 1.0], [0.0, 0.0]])
        with pytest.raises(NumericalInvariantError):
            SYK2(2, strict=True)._check_hermitian(broken)
        # logged only
        SYK2(2, strict=False)._check_hermitian(broken)

    def test_terms_are_not_supported(self):
        with pytest.raises(NotImplementedError):
            SYK2(3).add_term(QuadraticTerm.Onsite, (0,), 1.0)
        with pytest.raises(NotImplementedError):
            SYK2(3).add_hopping(0, 1, 1.0)

    def test_single_particle_matrix_is_rejected(self):
        model = SYK2(3, seed=4)
        with pytest.raises(NotImplementedError):
            model.set_single_particle_matrix(np.eye(3))
        np.testing.assert_array_equal(model.hamiltonian(), SYK2(3, seed=4).hamiltonian())

##########################################################################################
#! FREE FERMIONS
##########################################################################################

class TestFreeFermions:

    @pytest.mark.parametrize("ns,t,t2", [(6, 1.0, 0.0), (7, 0.5, 0.3), (8, -1.0, 0.25)])
    def test_spectrum_matches_dispersion(self, ns, t, t2):
        model   = FreeFermions(ns, t=t, t2=t2)
        H       = model.hamiltonian()
        assert model.has_analytic_spectrum
        E, V    = model.analytic_spectrum()
        np.testing.assert_allclose(np.sort(E), np.linalg.eigvalsh(H), atol=1e-12)
        # plane waves diagonalize the chain
        np.testing.assert_allclose(V.conj().T @ H @ V, np.diag(E), atol=1e-12)

    def test_open_chain(self):
        model   = FreeFermions(4, t=1.0, bc="obc")
        H       = model.hamiltonian()
        assert H[0, 3] == 0.0
        assert H[0, 1] == -1.0
        assert not model.has_analytic_spectrum
        with pytest.raises(ValueError):
            model.analytic_spectrum()
        assert model.info() == "_FreeFermions,Ns=4,BC=OBC,_t=1,_t2=0"

    def test_boundary_follows_the_lattice(self):
        lattice = SquareLattice(dim=1, lx=5, bc="obc")
        model   = FreeFermions(lattice, t=1.0)
        assert model.bc == "OBC"
        assert model.hamiltonian()[4, 0] == 0.0

    def test_terms_are_added_on_top_of_the_chain(self):
        model = FreeFermions(4, t=1.0)
        model.add_onsite(0, 0.5)
        H = model.hamiltonian()
        assert H[0, 0] == 0.5
        assert H[0, 1] == -1.0

##########################################################################################
#! AUBRY-ANDRE
##########################################################################################

class TestAubryAndre:

    def test_quasi_periodic_potential_and_hopping(self):
        model   = AubryAndre(5, J=0.7, lmbd=1.3, beta=0.5, phi=0.1)
        H       = model.hamiltonian()
        pot     = 1.3 * np.cos(2.0 * np.pi * 0.5 * np.arange(5) + 0.1)
        np.testing.assert_allclose(np.diag(H), pot)
        np.testing.assert_allclose(model.onsite_energies(), pot)
        assert H[0, 1] == H[1, 0] == 0.7
        assert H[4, 0] == 0.7
        np.testing.assert_allclose(H, H.T)

    def test_open_boundary_and_info(self):
        model   = AubryAndre(4, J=1.0, lmbd=0.5, beta=0.25, phi=0.0, bc="obc")
        H       = model.hamiltonian()
        assert H[3, 0] == 0.0
        assert model.info() == "_AubryAndre,Ns=4,BC=OBC,_J=1,_l=0.5,_b=0.25,_p=0"

##########################################################################################
#! POWER-LAW RANDOM BANDED
##########################################################################################

class TestPowerLawRandomBanded:

    def test_envelope(self):
        env = plrb_envelope(4, a=1.0, b=1.0)
        np.testing.assert_allclose(np.diag(env), 1.0)
        np.testing.assert_allclose(env[0, 1], 1.0 / np.sqrt(2.0))
        np.testing.assert_allclose(env[0, 3], 1.0 / np.sqrt(10.0))
        np.testing.assert_allclose(env, env.T)
        with pytest.raises(ValueError):
            plrb_envelope(4, a=1.0, b=0.0)

    def test_realization(self):
        model   = PowerLawRandomBanded(8, a=1.2, b=0.5, seed=4)
        H       = model.hamiltonian()
        assert H.shape == (8, 8)
        np.testing.assert_allclose(H, H.T)
        np.testing.assert_array_equal(PowerLawRandomBanded(8, a=1.2, b=0.5, seed=4).hamiltonian(), H)
        assert model.info() == "_PLRB,Ns=8,BC=PBC,_a=1.2,_b=0.5,_mb=0"

    def test_complex_realization_uses_gue(self):
        H = PowerLawRandomBanded(6, dtype=np.complex128, seed=2).hamiltonian()
        assert np.abs(H.imag).max() > 0.0
        np.testing.assert_allclose(H, H.conj().T)

# ----------------------------------------------------------------------------------------------------
#! End of test_quadratic_models.py
# ----------------------------------------------------------------------------------------------------
