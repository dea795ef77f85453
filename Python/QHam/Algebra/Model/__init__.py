"""
QHam Model Module
=================

This module provides the catalog of Hamiltonians.

Submodules:
-----------
- Interacting: many-body models (spin chains, random-matrix models)
- Noninteracting: quadratic models
- model_params: aggregate parameter record

Author: Maksymilian Kliczkowski
Email: maksymilian.kliczkowski@pwr.edu.pl
"""

from dataclasses import replace
from typing import Optional, Union, TYPE_CHECKING

from QHam.Algebra.Hamil.hamil_types             import HamiltonianModels
from QHam.Algebra.Model.model_params            import ModelParameters, _resized
from QHam.common.errors                         import HamiltonianConfigurationError

from . import Interacting as intr
from . import Noninteracting as nintr

from .Interacting.Spin                          import Ising, XYZ, HeisenbergKitaev
from .Interacting.Random                        import QSM, RosenzweigPorter, Ultrametric
from .Noninteracting.syk                        import SYK2
from .Noninteracting.aubry_andre                import AubryAndre
from .Noninteracting.plrb                       import PowerLawRandomBanded
from .Noninteracting.free_fermions              import FreeFermions

if TYPE_CHECKING:
    from QHam.Algebra.hamil                     import Hamiltonian

__all__ = ["intr", "nintr", "choose_model", "MODEL_CLASSES", "HamiltonianModels", "ModelParameters",
        "Ising", "XYZ", "HeisenbergKitaev", "QSM", "RosenzweigPorter", "Ultrametric",
        "SYK2", "AubryAndre", "PowerLawRandomBanded", "FreeFermions"]

MODEL_CLASSES = {
    HamiltonianModels.ISING                         : Ising,
    HamiltonianModels.XYZ                           : XYZ,
    HamiltonianModels.HEI_KITAEV                    : HeisenbergKitaev,
    HamiltonianModels.QSM                           : QSM,
    HamiltonianModels.RP                            : RosenzweigPorter,
    HamiltonianModels.ULTRAMETRIC                   : Ultrametric,
    HamiltonianModels.FREE_FERMIONS                 : FreeFermions,
    HamiltonianModels.AUBRY_ANDRE                   : AubryAndre,
    HamiltonianModels.SYK2                          : SYK2,
    HamiltonianModels.POWER_LAW_RANDOM_BANDWIDTH    : PowerLawRandomBanded,
}

####################################################################################################

def _or_default(values, default):
    ''' Per-site list from the record, a scalar default when it was never sized. '''
    return list(values) if len(values) > 0 else default

def _per_site(values, ns: Optional[int], default):
    '''
    Site couplings from the record: a single entry is uniform, a longer list
    is resized to ``ns`` sites (when known), an empty one gives ``default``.
    '''
    if len(values) == 0:
        return default
    if len(values) == 1:
        return float(values[0])
    return _resized(values, ns) if ns is not None else list(values)

def _from_params(p: ModelParameters, ns: Optional[int]) -> dict:
    ''' Constructor arguments of the model selected in the record. '''
    typ = p.mod_typ
    if typ == HamiltonianModels.ISING:
        return dict(J=p.J1, hz=p.hz, hx=p.hx)
    if typ == HamiltonianModels.XYZ:
        return dict(J1=p.J1, J2=p.J2, eta1=p.eta1, eta2=p.eta2, dlt1=p.dlt1, dlt2=p.dlt2, hz=p.hz, hx=p.hx)
    if typ == HamiltonianModels.HEI_KITAEV:
        return dict(Kx=_per_site(p.Kx, ns, 0.0), Ky=_per_site(p.Ky, ns, 0.0), Kz=_per_site(p.Kz, ns, 0.0),
                    J=_per_site(p.hei_J, ns, 1.0), dlt=_per_site(p.hei_dlt, ns, 1.0),
                    hz=_per_site(p.hei_hz, ns, 0.0), hx=_per_site(p.hei_hx, ns, 0.0))
    if typ == HamiltonianModels.QSM:
        # resize a copy, the record of the caller stays untouched
        q = replace(p.qsm)
        q.resize()
        return dict(ns=ns if ns is not None else q.Ntot, N=q.N, gamma=q.gamma, g0=q.g0,
                    alpha=_or_default(q.alpha, 0.75), xi=_or_default(q.xi, 0.0), h=_or_default(q.h, 1.0))
    if typ == HamiltonianModels.RP:
        g = p.rp.g[0] if len(p.rp.g) > 0 else 1.0
        return dict(gamma=g, be_real=p.rp.be_real)
    if typ == HamiltonianModels.ULTRAMETRIC:
        u = replace(p.um)
        u.resize()
        return dict(ns=ns if ns is not None else u.Ntot, N=u.N, g=u.g, alpha=_or_default(u.alpha, 0.75))
    if typ == HamiltonianModels.AUBRY_ANDRE:
        a = p.aubry_andre
        return dict(J=a.J, lmbd=a.lmbd, beta=a.beta, phi=a.phi)
    if typ == HamiltonianModels.POWER_LAW_RANDOM_BANDWIDTH:
        a = p.plrb.a[0] if len(p.plrb.a) > 0 else 1.0
        return dict(a=a, b=p.plrb.b, many_body=p.plrb.many_body)
    return {}

def choose_model(model: Union[str, int, HamiltonianModels, ModelParameters], **kwargs) -> "Hamiltonian":
    """
    Factory function to choose a quantum model.

    Args:
        model (str, int, HamiltonianModels or ModelParameters):
            Type of model (e.g. "ising", "syk2", HamiltonianModels.QSM) or a
            parameter record whose ``mod_typ`` selects the model and whose
            fields provide its couplings.
        **kwargs:
            Parameters for the model constructor (lattice, ns, hilbert_space,
            seed, dtype, ...). They override values taken from the record.
    Returns:
        Hamiltonian: An instance of the desired quantum model.
    Raises:
        HamiltonianConfigurationError: if the type tag does not name a model of the catalog.
    """
    if isinstance(model, ModelParameters):
        typ     = model.mod_typ
        args    = _from_params(model, kwargs.get('ns'))
        if model.ran_seed:
            args.setdefault('seed', model.ran_seed)
        args.update({k: v for k, v in kwargs.items() if v is not None})
        # a given lattice or Hilbert space fixes the system size
        if kwargs.get('ns') is None and (kwargs.get('lattice') is not None or kwargs.get('hilbert_space') is not None):
            args.pop('ns', None)
        if model.check_complex() and args.get('dtype') is None:
            args['dtype'] = complex
    else:
        typ     = HamiltonianModels.from_str(model)
        args    = {k: v for k, v in kwargs.items() if v is not None}

    cls = MODEL_CLASSES.get(typ)
    if cls is None:
        raise HamiltonianConfigurationError(f"Unknown model '{typ.name}'.")

    return cls(**args)

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
