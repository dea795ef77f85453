r"""
Ultrametric random matrix model: a GOE dot dressed by hierarchical layers
of random couplings.

.. math::

    H = \sum_{k=0}^{L} J_k \, I_{2^{L-k}} \otimes H_k,

where :math:`H_0` is a GOE matrix of the dot (dimension :math:`2^N`),
:math:`J_0 = 1`, and for :math:`k = 1, \dots, L`

.. math::

    J_k = g \, \alpha_k^k, \qquad H_k = \frac{R_{2^{N+k}}}{\sqrt{2^{N+k} + 1}},

with :math:`R` drawn from the GOE. Layer ``k`` acts on the lowest ``N + k``
bits of a configuration.

------------------------------------------------------------------------------
File        : Algebra/Model/Interacting/Random/ultrametric.py
Author      : Maksymilian Kliczkowski
------------------------------------------------------------------------------
"""

import numpy as np
import scipy as sp
import scipy.sparse
from typing import List, Optional, Union

try:
    from QHam.Algebra.hamil                 import Hamiltonian
    from QHam.Algebra.Hamil.hamil_types     import HamiltonianModels
    from QHam.common.errors                 import HamiltonianConfigurationError
    from QHam.common.ran_wrapper            import RMT, random_matrix
except ImportError as e:
    raise ImportError("Failed to import QHam modules. Ensure that the QHam package is correctly installed.") from e

##########################################################################################

class Ultrametric(Hamiltonian):
    '''
    Ultrametric model of ``Ntot = ns`` spins with a dot of ``N`` spins.
    '''

    _NAME   = "UM"
    _TYPE   = HamiltonianModels.ULTRAMETRIC

    def __init__(self,
                ns              : Optional[int]                             = None,
                N               : int                                       = 1,
                alpha           : Union[List[float], np.ndarray, float]     = 0.75,
                g               : float                                     = 1.0,
                **kwargs):
        '''
        Parameters:
            ns :
                total number of spins ``Ntot``
            N :
                number of spins in the dot
            alpha :
                decay of the layer couplings, one value per layer ``k = 1..L``
            g :
                overall coupling of the layers
        '''
        kwargs.setdefault('is_sparse', False)
        kwargs.pop('is_manybody', None)
        super().__init__(True, ns=ns, **kwargs)
        if N < 1 or N > self._ns:
            raise HamiltonianConfigurationError(f"UM: the dot size N must satisfy 1 <= N <= Ntot, got N={N}, Ntot={self._ns}.")
        self._N         = int(N)
        self._g         = g
        self._alpha     = self._set_some_coupling(alpha, size=self.n_layers).astype(np.float64)
        self._post_init()

    # ----------------------------------------------------------------------------------------------

    @property
    def N(self) -> int:             return self._N
    @property
    def n_layers(self) -> int:      return self._ns - self._N
    @property
    def g(self) -> float:           return self._g
    @property
    def alpha(self) -> np.ndarray:  return self._alpha

    def layer_couplings(self) -> np.ndarray:
        ''' ``J_k`` for ``k = 0..L`` with ``J_0 = 1``. '''
        k = np.arange(1, self.n_layers + 1)
        return np.concatenate(([1.0], self._g * np.power(self._alpha, k)))

    def _info_params(self):
        return [("N", self._N), ("g", self._g), ("alpha", self._alpha)]

    # ----------------------------------------------------------------------------------------------

    def _layer(self, k: int) -> np.ndarray:
        dim = 1 << (self._N + k)
        mat = random_matrix((dim, dim), typek=RMT.GOE, rng=self._rng)
        self._check_hermitian(mat, what=f"UM layer {k}")
        return mat if k == 0 else mat / np.sqrt(dim + 1)

    def _hamiltonian(self) -> None:
        L       = self.n_layers
        nhfull  = self._hilbert_space.nhfull
        self._log(f"Building UM Hamiltonian with N={self._N}, L={L}...", lvl=2, log='debug', color='green')
        total   = sp.sparse.csr_matrix((nhfull, nhfull), dtype=np.float64)
        for k, jk in enumerate(self.layer_couplings()):
            hk      = sp.sparse.csr_matrix(self._layer(k))
            total   = total + jk * sp.sparse.kron(sp.sparse.identity(1 << (L - k), format='csr'), hk, format='csr')
        self._store(self._project_to_sector(total))

# ----------------------------------------------------------------------------------------------
#! END OF FILE
# ----------------------------------------------------------------------------------------------
