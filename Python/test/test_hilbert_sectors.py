"""
Tests of global symmetry generators and the symmetry sectors they select.

Author: Maksymilian Kliczkowski
"""

from math import comb

import numpy as np
import pytest

from QHam.Algebra.globals import (
    GlobalSymmetries,
    GlobalSymmetry,
    GlobalSymmetryCombination,
    get_u1_sym,
    get_z2_parity_sym,
    parse_global_syms,
)
from QHam.Algebra.hilbert import HilbertSpace, ReducedBasis, build_reduced_basis
from QHam.Algebra.hilbert_config import HilbertConfig
from QHam.common.errors import SymmetryConfigurationError

##########################################################################################
#! GENERATORS
##########################################################################################

class TestGlobalSymmetry:

    def test_unset_predicate_raises(self):
        sym = GlobalSymmetry(ns=4, val=1.0)
        assert not sym.configured
        with pytest.raises(SymmetryConfigurationError):
            sym(3)
        with pytest.raises(SymmetryConfigurationError):
            build_reduced_basis(4, [sym])

    def test_missing_size_raises(self):
        with pytest.raises(ValueError):
            GlobalSymmetry()

    def test_u1_predicate_and_check_state(self):
        sym = get_u1_sym(ns=4, val=2)
        assert sym.get_name() == GlobalSymmetries.U1
        assert sym.get_name_str() == "U1"
        assert sym(3) and sym(10)
        assert not sym(7)
        assert sym.check_state(5, True)
        assert not sym.check_state(5, False)
        assert not sym.check_state(1, True)

    def test_setters_replace_predicate_and_target(self):
        sym = GlobalSymmetry(ns=3)
        sym.set_fun(lambda state, val: state == val)
        sym.set_val(5)
        assert sym(5)
        assert not sym(4)
        with pytest.raises(TypeError):
            sym.set_fun(42)

    def test_z2_parity_values(self):
        even = get_z2_parity_sym(ns=3, val=1)
        odd  = get_z2_parity_sym(ns=3, val=-1)
        for state in range(8):
            assert even(state) != odd(state)
        with pytest.raises(ValueError):
            get_z2_parity_sym(ns=3, val=0)

    def test_parse_from_mapping(self):
        syms = parse_global_syms(None, {"u1": 2, "Z2_PARITY": 1}, ns=4)
        assert [s.get_name() for s in syms] == [GlobalSymmetries.U1, GlobalSymmetries.Z2_PARITY]
        with pytest.raises(ValueError):
            parse_global_syms(None, {"translation": 0}, ns=4)

##########################################################################################
#! COMBINATIONS
##########################################################################################

class TestSymmetryCombination:

    def test_empty_combination_accepts_everything(self):
        comb_ = GlobalSymmetryCombination()
        assert len(comb_) == 0
        assert all(comb_(s) for s in range(16))

    def test_evaluation_stops_at_first_rejection(self):
        calls = []

        def record(state, _val):
            calls.append(state)
            return True

        other = GlobalSymmetry(ns=4)
        other.set_fun(record)
        comb_ = GlobalSymmetryCombination([get_u1_sym(ns=4, val=1), other])
        accepted = [s for s in range(16) if comb_(s)]

        assert accepted == [1, 2, 4, 8]
        assert calls == [1, 2, 4, 8]

    def test_jittable_only_with_canonical_predicates(self):
        assert GlobalSymmetryCombination([get_u1_sym(ns=4, val=1)]).jittable
        custom = get_u1_sym(ns=4, val=1)
        custom.set_fun(lambda state, val: bin(state).count("1") == val)
        assert not GlobalSymmetryCombination([custom]).jittable

##########################################################################################
#! SECTORS
##########################################################################################

class TestSectors:

    def test_u1_half_filling_of_four_sites(self):
        hilbert = HilbertSpace(ns=4, global_syms=[get_u1_sym(ns=4, val=2)])
        np.testing.assert_array_equal(hilbert.states(), [3, 5, 6, 9, 10, 12])
        assert hilbert.nh == 6
        assert hilbert.nhfull == 16
        assert hilbert.modifies
        assert hilbert.find_index(9) == 3
        assert hilbert.find_index(7) == -1
        assert hilbert.get_state(5) == 12
        assert 10 in hilbert
        with pytest.raises(IndexError):
            hilbert.get_state(6)

    @pytest.mark.parametrize("ns", range(1, 21))
    def test_u1_sectors_have_binomial_size_and_partition_the_space(self, ns):
        seen = []
        for k in range(ns + 1):
            basis = build_reduced_basis(ns, [get_u1_sym(ns=ns, val=k)])
            assert len(basis) == comb(ns, k)
            assert np.all(np.diff(basis.mapping) > 0)
            seen.append(basis.mapping)
        np.testing.assert_array_equal(np.sort(np.concatenate(seen)), np.arange(1 << ns))

    def test_z2_sectors_split_the_space_in_halves(self):
        even = build_reduced_basis(5, [get_z2_parity_sym(ns=5, val=1)])
        odd  = build_reduced_basis(5, [get_z2_parity_sym(ns=5, val=-1)])
        assert len(even) == len(odd) == 16
        assert all(bin(s).count("1") % 2 == 0 for s in even)
        assert set(even).isdisjoint(set(odd))

    def test_compiled_and_python_predicates_agree(self):
        custom = GlobalSymmetry(ns=6, val=3)
        custom.set_fun(lambda state, val: bin(int(state)).count("1") == val)
        compiled = build_reduced_basis(6, [get_u1_sym(ns=6, val=3)])
        python   = build_reduced_basis(6, [custom])
        np.testing.assert_array_equal(compiled.mapping, python.mapping)

    def test_state_filter_is_appended_after_generators(self):
        hilbert = HilbertSpace(ns=4, global_syms=[get_u1_sym(ns=4, val=2)], state_filter=lambda s: s % 3 == 0)
        np.testing.assert_array_equal(hilbert.states(), [3, 6, 9, 12])
        assert hilbert.global_syms[-1].get_name() == GlobalSymmetries.Other

    def test_full_space_has_empty_mapping(self):
        hilbert = HilbertSpace(ns=3)
        assert not hilbert.modifies
        assert hilbert.mapping.shape == (0,)
        assert hilbert.nh == 8
        assert hilbert.find_index(5) == 5
        assert hilbert.find_index(8) == -1

    def test_reduced_basis_is_read_only(self):
        basis = build_reduced_basis(3, [get_u1_sym(ns=3, val=1)])
        assert isinstance(basis, ReducedBasis)
        with pytest.raises(ValueError):
            basis.mapping[0] = 7
        assert basis.index(4) == 2
        assert basis.index(3) == -1

    def test_quadratic_space_rejects_symmetries(self):
        with pytest.raises(ValueError):
            HilbertSpace(ns=4, is_manybody=False, global_syms=[get_u1_sym(ns=4, val=2)])
        assert HilbertSpace(ns=4, is_manybody=False).nh == 4

    def test_lattice_and_size_must_agree(self, chain4):
        assert HilbertSpace(lattice=chain4).ns == 4
        with pytest.raises(ValueError):
            HilbertSpace(ns=5, lattice=chain4)

    def test_config_blueprint_builds_the_sector(self):
        config  = HilbertConfig(ns=4, sectors={"U1": 2})
        hilbert = config.build()
        np.testing.assert_array_equal(hilbert.states(), [3, 5, 6, 9, 10, 12])
        assert config.with_override(sectors={"U1": 1}).build().nh == 4
        assert HilbertSpace.from_config(config).nh == 6

# ----------------------------------------------------------------------------------------------------
#! End of test_hilbert_sectors.py
# ----------------------------------------------------------------------------------------------------
