r"""
Rosenzweig-Porter random matrix model on the many-body space.

.. math::

    H = \mathrm{diag}(\varepsilon) + N_h^{-\gamma/2} V,
    \qquad \varepsilon_i \sim \mathcal{N}(0, 1),

with :math:`V` the off-diagonal part of a GOE matrix (GUE for complex
couplings). The model is ergodic for :math:`\gamma < 1`, fractal for
:math:`1 < \gamma < 2` and localized for :math:`\gamma > 2`.

------------------------------------------------------------------------------
File        : Algebra/Model/Interacting/Random/rosenzweig_porter.py
Author      : Maksymilian Kliczkowski
------------------------------------------------------------------------------
"""

import numpy as np
from typing import Optional

try:
    from QHam.Algebra.hamil                 import Hamiltonian
    from QHam.Algebra.Hamil.hamil_types     import HamiltonianModels
    from QHam.common.errors                 import HamiltonianConfigurationError
    from QHam.common.ran_wrapper            import RMT, random_matrix
except ImportError as e:
    raise ImportError("Failed to import QHam modules. Ensure that the QHam package is correctly installed.") from e

##########################################################################################

class RosenzweigPorter(Hamiltonian):
    '''
    Rosenzweig-Porter ensemble sampled on the full configuration space of
    ``ns`` sites and restricted to the sector of the Hilbert space.
    '''

    _NAME   = "RP"
    _TYPE   = HamiltonianModels.RP

    def __init__(self,
                ns              : Optional[int] = None,
                gamma           : float         = 1.0,
                be_real         : bool          = True,
                **kwargs):
        '''
        Parameters:
            ns :
                number of sites, the matrix has dimension ``2^ns``
            gamma :
                scaling exponent of the off-diagonal part
            be_real :
                GOE (True) or GUE (False) off-diagonal elements. The GUE
                requires a complex dtype, complex128 is chosen when none is given.
        '''
        if not be_real and kwargs.get('dtype') is None:
            kwargs['dtype'] = np.complex128
        kwargs.setdefault('is_sparse', False)
        kwargs.pop('is_manybody', None)
        super().__init__(True, ns=ns, **kwargs)
        if not be_real and not self._iscpx:
            raise HamiltonianConfigurationError(f"RP with complex couplings cannot be stored as {self._dtype}.")
        self._gamma     = gamma
        self._be_real   = be_real
        self._post_init()

    @property
    def gamma(self) -> float:               return self._gamma
    @gamma.setter
    def gamma(self, value: float):          self._gamma = value
    @property
    def be_real(self) -> bool:              return self._be_real

    def _info_params(self):
        return [("g", self._gamma), ("r", self._be_real)]

    def _hamiltonian(self) -> None:
        nh          = self._hilbert_space.nhfull
        self._log(f"Building RP Hamiltonian of size {nh} with gamma={self._gamma}...", lvl=2, log='debug', color='green')
        ens         = RMT.GOE if self._be_real else RMT.GUE
        offdiag     = random_matrix((nh, nh), typek=ens, rng=self._rng)
        offdiag[np.diag_indices(nh)] = 0.0
        mat         = np.power(float(nh), -self._gamma / 2.0) * offdiag
        mat[np.diag_indices(nh)] = self._rng.normal(0.0, 1.0, size=nh)
        self._check_hermitian(mat, what="RP matrix")
        self._store(self._project_to_sector(mat))

# ----------------------------------------------------------------------------------------------
#! END OF FILE
# ----------------------------------------------------------------------------------------------
