"""
Aggregate parameter record and the model factory.
"""

import numpy as np
import pytest

from QHam.Algebra.Hamil.hamil_types import HamiltonianModels
from QHam.Algebra.Model import (
    MODEL_CLASSES,
    QSM,
    SYK2,
    AubryAndre,
    HeisenbergKitaev,
    Ising,
    RosenzweigPorter,
    Ultrametric,
    choose_model,
)
from QHam.Algebra.Model.model_params import (
    ModelParameters,
    PLRBParams,
    QSMParams,
    RPParams,
    UMParams,
)
from QHam.common.errors import HamiltonianConfigurationError

##########################################################################################
#! RECORD
##########################################################################################

class TestModelParameters:

    def test_defaults(self):
        p = ModelParameters()
        assert p.mod_typ == HamiltonianModels.ISING
        assert p.ran_n == [1]
        assert p.get_ran_real() == 1
        assert not p.check_complex()
        assert p.plrb.a == [1.0]

    def test_model_tag_from_string(self):
        assert ModelParameters(mod_typ="qsm").mod_typ == HamiltonianModels.QSM
        assert ModelParameters(mod_typ="ISING_M").mod_typ == HamiltonianModels.ISING
        with pytest.raises(HamiltonianConfigurationError):
            ModelParameters(mod_typ="not_a_model")

    def test_qsm_resize_pads_and_truncates(self):
        q = QSMParams(N=1, Ntot=4, alpha=[0.5], xi=[0.1, 0.2, 0.3, 0.4], h=[])
        q.resize()
        assert q.alpha == [0.5, 0.0, 0.0]
        assert q.xi == [0.1, 0.2, 0.3]
        assert q.h == [0.0, 0.0, 0.0]
        assert q.n_out == 3

    def test_resize_with_negative_size_clamps_to_empty(self):
        q = QSMParams(N=5, Ntot=3, alpha=[1.0, 2.0])
        q.resize()
        assert q.alpha == [] and q.xi == [] and q.h == []
        assert q.n_out == 0

        u = UMParams(N=4, Ntot=2, alpha=[0.3])
        u.resize()
        assert u.alpha == []

        r = RPParams(g=[0.5, 1.0], g_sweep_n=-1)
        r.resize()
        assert r.g == []

    def test_site_resizes(self):
        p = ModelParameters(Kx=[1.0, 2.0, 3.0])
        p.resize_kitaev(2)
        assert p.Kx == [1.0, 2.0]
        assert p.Ky == [0.0, 0.0]
        p.resize_heisenberg(3)
        assert p.hei_J == [0.0, 0.0, 0.0]
        p.resize_heisenberg(-2)
        assert p.hei_dlt == []

    def test_realizations_index_is_clamped(self):
        p = ModelParameters(ran_n=[5, 10, 20], ran_n_idx=1)
        assert p.get_ran_real() == 10
        assert p.get_ran_real(7) == 20
        assert p.get_ran_real(-3) == 5
        p.ran_n = []
        assert p.get_ran_real() == 1

    def test_complex_flag_and_reset(self):
        p = ModelParameters(mod_typ=HamiltonianModels.RP, rp=RPParams(be_real=False))
        assert p.check_complex()
        p.J1 = 7.0
        p.set_default()
        assert p.J1 == 1.0
        assert p.mod_typ == HamiltonianModels.ISING
        assert not p.check_complex()
        assert ModelParameters(mod_typ=HamiltonianModels.FREE_FERMIONS).check_complex()

    def test_reset_gives_every_family_unit_couplings(self):
        p = ModelParameters(Kx=[0.2, 0.3], hei_hz=[], ran_n=[4, 8])
        p.set_default()
        for values in (p.Kx, p.Ky, p.Kz, p.hei_J, p.hei_dlt, p.hei_hz, p.hei_hx,
                       p.qsm.alpha, p.qsm.xi, p.qsm.h, p.rp.g):
            assert values == [1.0]
        assert p.ran_n == [1]
        assert (p.qsm.N, p.qsm.Ntot) == (1, 1)
        # the reset record is not shared with a fresh one
        assert ModelParameters().Kx == []

##########################################################################################
#! FACTORY
##########################################################################################

class TestChooseModel:

    @pytest.mark.parametrize("tag,cls", [
        ("ising", Ising),
        ("tfim", Ising),
        (HamiltonianModels.HEI_KITAEV, HeisenbergKitaev),
        ("rp", RosenzweigPorter),
        ("syk2", SYK2),
        ("aa", AubryAndre),
    ])
    def test_by_tag(self, tag, cls):
        model = choose_model(tag, ns=4, seed=1)
        assert isinstance(model, cls)
        assert model.ns == 4

    def test_by_integer_tag(self):
        assert isinstance(choose_model(102, ns=3), SYK2)

    def test_every_model_has_a_class(self):
        assert set(MODEL_CLASSES) == set(HamiltonianModels) - {HamiltonianModels.NONE}

    def test_unknown_tags_raise(self):
        with pytest.raises(HamiltonianConfigurationError):
            choose_model("nope", ns=4)
        with pytest.raises(HamiltonianConfigurationError):
            choose_model(HamiltonianModels.NONE, ns=4)
        with pytest.raises(HamiltonianConfigurationError):
            choose_model(999, ns=4)

    def test_record_selects_and_configures_the_model(self):
        p = ModelParameters(mod_typ="ising", J1=0.5, hz=0.25, hx=0.0)
        model = choose_model(p, ns=3)
        assert isinstance(model, Ising)
        np.testing.assert_allclose(model.J, 0.5)
        np.testing.assert_allclose(model.hx, 0.0)

    def test_record_for_qsm_uses_total_size(self):
        p = ModelParameters(mod_typ="qsm", ran_seed=3,
                            qsm=QSMParams(N=1, Ntot=3, gamma=1.0, g0=1.0, alpha=[0.8, 0.9], xi=[0.1, 0.2], h=[1.0, 1.2]))
        model = choose_model(p)
        assert isinstance(model, QSM)
        assert model.ns == 3
        assert model.seed == 3
        np.testing.assert_allclose(model.alpha, [0.8, 0.9])
        np.testing.assert_allclose(model.h, [1.0, 1.2])

    def test_record_for_ultrametric(self):
        p = ModelParameters(mod_typ="um", um=UMParams(N=1, Ntot=3, alpha=[0.5], g=2.0))
        model = choose_model(p)
        assert isinstance(model, Ultrametric)
        np.testing.assert_allclose(model.alpha, [0.5, 0.0])

    def test_record_for_complex_rp(self):
        p = ModelParameters(mod_typ="rp", rp=RPParams(g=[0.7], be_real=False))
        model = choose_model(p, ns=3)
        assert model.iscpx
        assert model.gamma == 0.7

    def test_record_for_plrb(self):
        p = ModelParameters(mod_typ="plrb", plrb=PLRBParams(a=[1.5], b=2.0))
        model = choose_model(p, ns=5)
        assert (model.a, model.b) == (1.5, 2.0)

    def test_reset_record_builds_unit_heisenberg_kitaev(self):
        p = ModelParameters(mod_typ="hei_kitaev")
        p.set_default()
        p.mod_typ = HamiltonianModels.HEI_KITAEV
        model = choose_model(p, ns=4)
        assert isinstance(model, HeisenbergKitaev)
        assert model.info() == "_HeiKit,Ns=4,BC=PBC,_Kx=1,_Ky=1,_Kz=1,_J=1,_dlt=1,_hz=1,_hx=1"

    def test_site_lists_of_the_record_are_resized_to_the_system(self):
        p = ModelParameters(mod_typ=HamiltonianModels.HEI_KITAEV, Kz=[0.5, 1.5], hei_J=[2.0])
        model = choose_model(p, ns=4)
        np.testing.assert_allclose(model.Kz, [0.5, 1.5, 0.0, 0.0])
        np.testing.assert_allclose(model.J, 2.0)
        assert p.Kz == [0.5, 1.5]

    def test_factory_does_not_resize_the_record(self):
        q = QSMParams(N=1, Ntot=4, alpha=[0.5], xi=[0.1], h=[1.0])
        p = ModelParameters(mod_typ="qsm", qsm=q)
        model = choose_model(p, seed=2)
        np.testing.assert_allclose(model.alpha, [0.5, 0.0, 0.0])
        assert p.qsm is q
        assert (q.alpha, q.xi, q.h) == ([0.5], [0.1], [1.0])

        u = UMParams(N=1, Ntot=3, alpha=[0.5])
        choose_model(ModelParameters(mod_typ="um", um=u))
        assert u.alpha == [0.5]

    def test_record_for_free_fermions_is_complex(self):
        model = choose_model(ModelParameters(mod_typ=HamiltonianModels.FREE_FERMIONS), ns=4)
        assert model.iscpx
        H = model.hamiltonian()
        np.testing.assert_allclose(H, H.conj().T)

    def test_explicit_arguments_override_the_record(self, chain4):
        p = ModelParameters(mod_typ="ising", J1=0.5)
        model = choose_model(p, lattice=chain4, J=2.0)
        assert model.lattice is chain4
        np.testing.assert_allclose(model.J, 2.0)

# ----------------------------------------------------------------------------------------------------
#! End of test_model_params.py
# ----------------------------------------------------------------------------------------------------
