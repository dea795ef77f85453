"""
Aggregate parameter record of the model catalog.

A single :class:`ModelParameters` holds the couplings of every model of the
catalog together with the bookkeeping of random realizations. Nested records
group the parameters of the random and quasi-periodic models; their
``resize`` methods size the per-spin arrays from the system sizes.

Resizes never fail: a negative target size (e.g. a dot larger than the whole
system) clamps to zero and leaves the arrays empty.

---------------------------------------------------
File    : QHam/Algebra/Model/model_params.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from dataclasses import dataclass, field, fields
from typing import List, Optional

import numpy as np

from QHam.Algebra.Hamil.hamil_types import HamiltonianModels

GOLDEN_RATIO = (1.0 + np.sqrt(5.0)) / 2.0

####################################################################################################

def _resized(values: List[float], size: int) -> List[float]:
    ''' Truncate or pad with zeros to ``max(size, 0)`` entries. '''
    size = max(int(size), 0)
    return list(values[:size]) + [0.0] * max(size - len(values), 0)

####################################################################################################
#! Nested records
####################################################################################################

@dataclass
class QSMParams:
    ''' Quantum sun model: dot of ``N`` spins inside ``Ntot`` spins. '''
    N               : int           = 1
    Ntot            : int           = 1
    gamma           : float         = 1.0
    g0              : float         = 1.0
    alpha           : List[float]   = field(default_factory=list)
    xi              : List[float]   = field(default_factory=list)
    h               : List[float]   = field(default_factory=list)

    @property
    def n_out(self) -> int:
        return max(self.Ntot - self.N, 0)

    def resize(self) -> None:
        self.alpha  = _resized(self.alpha, self.Ntot - self.N)
        self.xi     = _resized(self.xi, self.Ntot - self.N)
        self.h      = _resized(self.h, self.Ntot - self.N)

@dataclass
class RPParams:
    ''' Rosenzweig-Porter: sweep of ``g_sweep_n`` exponents. '''
    g               : List[float]   = field(default_factory=list)
    single_particle : bool          = False
    be_real         : bool          = True
    g_sweep_n       : int           = 1

    def resize(self) -> None:
        self.g      = _resized(self.g, self.g_sweep_n)

@dataclass
class UMParams:
    ''' Ultrametric model: dot of ``N`` spins inside ``Ntot`` spins. '''
    N               : int           = 1
    Ntot            : int           = 1
    alpha           : List[float]   = field(default_factory=list)
    g               : float         = 1.0

    def resize(self) -> None:
        self.alpha  = _resized(self.alpha, self.Ntot - self.N)

@dataclass
class AubryAndreParams:
    J               : float         = 1.0
    lmbd            : float         = 0.5
    beta            : float         = GOLDEN_RATIO
    phi             : float         = 1.0

@dataclass
class PLRBParams:
    a               : List[float]   = field(default_factory=lambda: [1.0])
    b               : float         = 1.0
    many_body       : bool          = False

####################################################################################################
#! Main record
####################################################################################################

@dataclass
class ModelParameters:
    '''
    Parameters of the model catalog. ``mod_typ`` selects the model built by
    :func:`QHam.Algebra.Model.choose_model`.
    '''
    mod_typ         : HamiltonianModels = HamiltonianModels.ISING
    ran_n           : List[int]         = field(default_factory=lambda: [1])
    ran_seed        : int               = 0
    ran_n_idx       : int               = 0

    # ising
    J1              : float             = 1.0
    hz              : float             = 1.0
    hx              : float             = 1.0
    # xyz
    J2              : float             = 2.0
    eta1            : float             = 0.5
    eta2            : float             = 0.5
    dlt1            : float             = 0.3
    dlt2            : float             = 0.3
    # kitaev
    Kx              : List[float]       = field(default_factory=list)
    Ky              : List[float]       = field(default_factory=list)
    Kz              : List[float]       = field(default_factory=list)
    # heisenberg
    hei_J           : List[float]       = field(default_factory=list)
    hei_dlt         : List[float]       = field(default_factory=list)
    hei_hx          : List[float]       = field(default_factory=list)
    hei_hz          : List[float]       = field(default_factory=list)

    qsm             : QSMParams         = field(default_factory=QSMParams)
    rp              : RPParams          = field(default_factory=RPParams)
    um              : UMParams          = field(default_factory=UMParams)
    aubry_andre     : AubryAndreParams  = field(default_factory=AubryAndreParams)
    plrb            : PLRBParams        = field(default_factory=PLRBParams)

    def __post_init__(self):
        self.mod_typ = HamiltonianModels.from_str(self.mod_typ)

    # ----------------------------------------------------------------------------------------------

    def resize_kitaev(self, ns: int) -> None:
        self.Kx         = _resized(self.Kx, ns)
        self.Ky         = _resized(self.Ky, ns)
        self.Kz         = _resized(self.Kz, ns)

    def resize_heisenberg(self, ns: int) -> None:
        self.hei_J      = _resized(self.hei_J, ns)
        self.hei_dlt    = _resized(self.hei_dlt, ns)
        self.hei_hx     = _resized(self.hei_hx, ns)
        self.hei_hz     = _resized(self.hei_hz, ns)

    def get_ran_real(self, i: Optional[int] = None) -> int:
        '''
        Number of random realizations at position ``i`` (``ran_n_idx`` by
        default), the last entry when the index runs past the list.
        '''
        if not self.ran_n:
            return 1
        i = self.ran_n_idx if i is None else i
        return self.ran_n[min(max(i, 0), len(self.ran_n) - 1)]

    def check_complex(self) -> bool:
        '''
        True when the selected model needs complex matrix elements: the free
        fermions (complex plane-wave eigenvectors) and a Rosenzweig-Porter
        ensemble that is not restricted to real matrices.
        '''
        if self.mod_typ == HamiltonianModels.FREE_FERMIONS:
            return True
        return self.mod_typ == HamiltonianModels.RP and not self.rp.be_real

    def set_default(self) -> None:
        '''
        Reset every field to its default value and give every model family a
        minimal valid configuration: unit couplings for the Kitaev, Heisenberg,
        quantum sun and Rosenzweig-Porter arrays.
        '''
        default = ModelParameters()
        for f in fields(self):
            setattr(self, f.name, getattr(default, f.name))
        self.ran_n      = [1]
        self.Kx         = [1.0]
        self.Ky         = [1.0]
        self.Kz         = [1.0]
        self.hei_J      = [1.0]
        self.hei_dlt    = [1.0]
        self.hei_hz     = [1.0]
        self.hei_hx     = [1.0]
        self.qsm.alpha  = [1.0]
        self.qsm.xi     = [1.0]
        self.qsm.h      = [1.0]
        self.rp.g       = [1.0]

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
