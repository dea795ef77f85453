"""
Aubry-Andre model: a chain with nearest-neighbor hopping and a
quasi-periodic on-site potential.

-----------------------------------------------------
file    : QHam/Algebra/Model/Noninteracting/aubry_andre.py
author  : Maksymilian Kliczkowski
email   : maksymilian.kliczkowski@pwr.edu.pl
-----------------------------------------------------
"""

from    typing import TYPE_CHECKING, Optional, Union

import  numpy as np

try:
    from QHam.Algebra.hamil_quadratic           import QuadraticHamiltonian
    from QHam.Algebra.Hamil.hamil_types         import HamiltonianModels
    from QHam.lattices.lattice                  import LatticeBC

    if TYPE_CHECKING:
        from QHam.lattices.lattice              import Lattice

except ImportError as e:
    raise ImportError("Could not import QuadraticHamiltonian base class. Ensure that QHam package is properly installed.") from e

GOLDEN_RATIO = (1.0 + np.sqrt(5.0)) / 2.0

# ---------------------------------------------------------------------

class AubryAndre(QuadraticHamiltonian):
    r"""
    .. math::

        H = J \sum_i \left( c_i^\dagger c_{i+1} + h.c. \right)
            + \lambda \sum_i \cos(2\pi \beta i + \phi) n_i

    For irrational :math:`\beta` the model localizes at :math:`\lambda = 2J`.
    """

    _NAME   = "AubryAndre"
    _TYPE   = HamiltonianModels.AUBRY_ANDRE

    def __init__(self,
                ns              : Optional[Union[int, "Lattice"]] = None,
                J               : float = 1.0,
                lmbd            : float = 0.5,
                beta            : float = GOLDEN_RATIO,
                phi             : float = 1.0,
                *,
                bc              : Optional[Union[LatticeBC, str]] = None,
                **kwargs):
        super().__init__(ns, **kwargs)
        if bc is None:
            bc = self._lattice.bc if self._lattice is not None else LatticeBC.PBC
        self._bc_type   = LatticeBC.from_str(bc)
        self._J         = J
        self._lmbd      = lmbd
        self._beta      = beta
        self._phi       = phi
        self._post_init()

    # -----------------------------------------------------------------

    @property
    def bc(self) -> str:                return self._bc_type.name
    @property
    def J(self) -> float:               return self._J
    @J.setter
    def J(self, value: float):          self._J = value
    @property
    def lmbd(self) -> float:            return self._lmbd
    @lmbd.setter
    def lmbd(self, value: float):       self._lmbd = value
    @property
    def beta(self) -> float:            return self._beta
    @beta.setter
    def beta(self, value: float):       self._beta = value
    @property
    def phi(self) -> float:             return self._phi
    @phi.setter
    def phi(self, value: float):        self._phi = value

    def _info_params(self):
        return [("J", self._J), ("l", self._lmbd), ("b", self._beta), ("p", self._phi)]

    def onsite_energies(self) -> np.ndarray:
        ''' Quasi-periodic potential on every site. '''
        return self._lmbd * np.cos(2.0 * np.pi * self._beta * np.arange(self._ns) + self._phi)

    # -----------------------------------------------------------------

    def _hamiltonian_quadratic(self):
        super()._hamiltonian_quadratic()
        ns = self._ns
        self._hamil_sp[np.diag_indices(ns)] += self.onsite_energies()
        for i in range(ns):
            j = i + 1
            if j == ns:
                if self._bc_type != LatticeBC.PBC or ns < 3:
                    continue
                j = 0
            self._hamil_sp[i, j] += self._J
            self._hamil_sp[j, i] += self._J

# ---------------------------------------------------------------------
#! END OF FILE
# ---------------------------------------------------------------------
