r"""
Quantum sun model (QSM): an ergodic quantum dot coupled to a chain of
outside spins with couplings decaying with the distance from the dot.

.. math::

    H = \frac{\gamma}{\sqrt{2^N + 1}} R_{2^N} \otimes I
        + g_0 \sum_{j=1}^{L} \alpha_j^{u_j} S^x_{n_j} S^x_j
        + \sum_{j=1}^{L} h_j S^z_j,
    \qquad u_j = j + \xi_j,

with :math:`R` drawn from the GOE, :math:`n_j` a random spin of the dot and
spin-1/2 operators :math:`S = \sigma / 2`. The dot occupies the lowest
``N`` bits of a configuration, the outside spin ``j`` sits on bit ``N + j - 1``.

------------------------------------------------------------------------------
File        : Algebra/Model/Interacting/Random/qsm.py
Author      : Maksymilian Kliczkowski
------------------------------------------------------------------------------
"""

import numpy as np
import scipy as sp
import scipy.sparse
from typing import List, Optional, Union

try:
    from QHam.Algebra.Model.Interacting.Spin.hamiltonian_spin   import HamiltonianSpin
    from QHam.Algebra.Hamil.hamil_types                         import HamiltonianModels
    from QHam.common.errors                                     import HamiltonianConfigurationError
    from QHam.common.ran_wrapper                                import RMT, random_matrix
except ImportError as e:
    raise ImportError("Failed to import QHam modules. Ensure that the QHam package is correctly installed.") from e

Coupling = Union[List[float], np.ndarray, float, str]

##########################################################################################

class QSM(HamiltonianSpin):
    '''
    Hamiltonian for an ergodic quantum dot coupled to an external system.
    The external system is modeled as a chain of spins with random fields.

    The dot matrix and the dot partners ``n_j`` are drawn again on every
    :meth:`hamiltonian` call; ``xi`` and ``h`` given as random strings are
    drawn once, at construction.
    '''

    _NAME   = "QSM"
    _TYPE   = HamiltonianModels.QSM

    _ERR_PARTICLES_DONT_MATCH = "QSM: the dot size N must satisfy 1 <= N <= Ntot."

    def __init__(self,
                ns              : Optional[int] = None,
                N               : int           = 1,
                gamma           : float         = 1.0,
                g0              : float         = 1.0,
                alpha           : Coupling      = 0.75,
                xi              : Coupling      = "r;-0.2;0.2",
                h               : Coupling      = "r;0.5;1.5",
                **kwargs):
        '''
        Parameters:
            ns :
                total number of spins ``Ntot`` (or use ``lattice``/``hilbert_space``)
            N :
                number of spins in the dot
            gamma :
                strength of the dot Hamiltonian
            g0 :
                coupling between the dot and the outside spins
            alpha, xi, h :
                per outside spin: decay base, position disorder and field
        '''
        if ns is not None:
            kwargs['ns'] = ns
        kwargs.setdefault('is_sparse', False)
        super().__init__(**kwargs)

        if N < 1 or N > self._ns:
            raise HamiltonianConfigurationError(f"{QSM._ERR_PARTICLES_DONT_MATCH} Got N={N}, Ntot={self._ns}.")
        self._N         = int(N)
        self._gamma     = gamma
        self._g0        = g0
        self._alpha     = self._set_some_coupling(alpha, size=self.n_out).astype(np.float64)
        self._xi        = self._set_some_coupling(xi, size=self.n_out).astype(np.float64)
        self._h         = self._set_some_coupling(h, size=self.n_out).astype(np.float64)
        self._n_dot     = np.zeros(self.n_out, dtype=np.int64)
        self._post_init()

    # ----------------------------------------------------------------------------------------------

    @property
    def N(self) -> int:             return self._N
    @property
    def n_dot(self) -> int:         return self._N
    @property
    def n_out(self) -> int:         return self._ns - self._N
    @property
    def gamma(self) -> float:       return self._gamma
    @property
    def g0(self) -> float:          return self._g0
    @property
    def alpha(self) -> np.ndarray:  return self._alpha
    @property
    def xi(self) -> np.ndarray:     return self._xi
    @property
    def h(self) -> np.ndarray:      return self._h
    @property
    def dot_partners(self) -> np.ndarray:
        ''' Dot spins coupled to the outside spins in the last realization. '''
        return self._n_dot

    @property
    def u(self) -> np.ndarray:
        ''' Effective distances ``u_j = j + xi_j``. '''
        return np.arange(1, self.n_out + 1) + self._xi

    def _info_params(self):
        return [("N", self._N), ("g", self._gamma), ("g0", self._g0),
                ("alpha", self._alpha), ("xi", self._xi), ("h", self._h)]

    # ----------------------------------------------------------------------------------------------

    def _set_local_energy_operators(self):
        super()._set_local_energy_operators()
        couplings = self._g0 * np.power(self._alpha, self.u)
        for j in range(self.n_out):
            site = self._N + j
            # S = sigma / 2
            self.add_field(site, hz=0.5 * self._h[j])
            self.add_coupling(int(self._n_dot[j]), site, jxx=0.25 * couplings[j])

    def _dot_matrix(self) -> np.ndarray:
        dim = 1 << self._N
        mat = random_matrix((dim, dim), typek=RMT.GOE, rng=self._rng)
        self._check_hermitian(mat, what="QSM dot")
        return self._gamma / np.sqrt(dim + 1) * mat

    def _hamiltonian(self) -> None:
        self._log(f"Building QSM Hamiltonian with N={self._N}, L={self.n_out}...", lvl=2, log='debug', color='green')
        self._n_dot     = self._rng.integers(0, self._N, size=self.n_out).astype(np.int64)
        dot             = self._dot_matrix()
        super()._hamiltonian()
        dot_full        = sp.sparse.kron(sp.sparse.identity(1 << self.n_out, format='csr'), sp.sparse.csr_matrix(dot), format='csr')
        dot_sector      = self._project_to_sector(dot_full)
        spins           = self._hamil
        total           = (spins + dot_sector) if sp.sparse.issparse(spins) else (spins + dot_sector.toarray())
        self._store(total)

# ----------------------------------------------------------------------------------------------
#! END OF FILE
# ----------------------------------------------------------------------------------------------
