"""
Power-law random banded (PLRB) matrices.

-----------------------------------------------------
file    : QHam/Algebra/Model/Noninteracting/plrb.py
author  : Maksymilian Kliczkowski
email   : maksymilian.kliczkowski@pwr.edu.pl
-----------------------------------------------------
"""

from    typing import TYPE_CHECKING, Optional, Union

import  numpy as np

try:
    from QHam.Algebra.hamil_quadratic           import QuadraticHamiltonian
    from QHam.Algebra.Hamil.hamil_types         import HamiltonianModels
    from QHam.common.ran_wrapper                import RMT, random_matrix

    if TYPE_CHECKING:
        from QHam.lattices.lattice              import Lattice

except ImportError as e:
    raise ImportError("Could not import QuadraticHamiltonian base class. Ensure that QHam package is properly installed.") from e

# ---------------------------------------------------------------------

def plrb_envelope(n: int, a: float, b: float) -> np.ndarray:
    r'''
    Envelope :math:`[1 + (|i-j|/b)^{2a}]^{-1/2}` of an ``n x n`` matrix.
    '''
    if b <= 0:
        raise ValueError(f"Bandwidth must be positive, got b={b}.")
    idx     = np.arange(n)
    dist    = np.abs(idx[:, None] - idx[None, :]).astype(np.float64)
    return 1.0 / np.sqrt(1.0 + (dist / b) ** (2.0 * a))

class PowerLawRandomBanded(QuadraticHamiltonian):
    r"""
    .. math::

        H_{ij} = G_{ij} \left[ 1 + \left( \frac{|i-j|}{b} \right)^{2a} \right]^{-1/2},

    with :math:`G` from the GOE (GUE for a complex dtype). The transition
    between extended and localized eigenstates sits at :math:`a = 1`.

    ``many_body`` only marks the realization in the descriptive string.
    """

    _NAME   = "PLRB"
    _TYPE   = HamiltonianModels.POWER_LAW_RANDOM_BANDWIDTH

    def __init__(self,
                ns              : Optional[Union[int, "Lattice"]] = None,
                a               : float = 1.0,
                b               : float = 1.0,
                *,
                many_body       : bool  = False,
                **kwargs):
        super().__init__(ns, **kwargs)
        if b <= 0:
            raise ValueError(f"Bandwidth must be positive, got b={b}.")
        self._a         = a
        self._b         = b
        self._many_body = many_body
        self._post_init()

    @property
    def a(self) -> float:               return self._a
    @a.setter
    def a(self, value: float):          self._a = value
    @property
    def b(self) -> float:               return self._b
    @b.setter
    def b(self, value: float):          self._b = value
    @property
    def many_body(self) -> bool:        return self._many_body

    def _info_params(self):
        return [("a", self._a), ("b", self._b), ("mb", self._many_body)]

    def _hamiltonian_quadratic(self):
        self._log("Building PLRB Hamiltonian...", lvl=2, color="green", log='debug')
        ens             = RMT.GUE if self._iscpx else RMT.GOE
        mat             = random_matrix((self._nh, self._nh), typek=ens, rng=self._rng)
        self._hamil_sp  = (mat * plrb_envelope(self._nh, self._a, self._b)).astype(self._dtype)
        self._check_hermitian(self._hamil_sp, what="PLRB couplings")

# ---------------------------------------------------------------------
#! END OF FILE
# ---------------------------------------------------------------------
