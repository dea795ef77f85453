"""
Tight-binding chain of free fermions with nearest and next-nearest hopping.

-----------------------------------------------------
file    : QHam/Algebra/Model/Noninteracting/free_fermions.py
author  : Maksymilian Kliczkowski
email   : maksymilian.kliczkowski@pwr.edu.pl
date    : 2025-05-01
-----------------------------------------------------
"""

from    typing import TYPE_CHECKING, Optional, Tuple, Union

import  numba
import  numpy as np

# import the quadratic base
try:
    from QHam.Algebra.hamil_quadratic           import QuadraticHamiltonian
    from QHam.Algebra.Hamil.hamil_types         import HamiltonianModels
    from QHam.lattices.lattice                  import LatticeBC

    if TYPE_CHECKING:
        from QHam.Algebra.hamil                 import Array
        from QHam.lattices.lattice              import Lattice

except ImportError as e:
    raise ImportError(
        "Could not import QuadraticHamiltonian base class. Ensure that QHam package is properly installed."
    ) from e

# ---------------------------------------------------------------------
#! Spectrum
# ---------------------------------------------------------------------

@numba.njit
def _free_fermions_spectrum(ns: int, t: float, t2: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Analytic spectrum of the periodic chain with uniform hoppings.

    Parameters
    ----------
    ns : int
        Number of sites.
    t, t2 : float
        Nearest and next-nearest hopping amplitudes.

    Returns
    -------
    tuple
        Eigenvalues and plane-wave eigenvectors.
    """
    k               = np.arange(ns)
    twopi_over_L    = 2.0 * np.pi / ns
    eig_val         = -2.0 * t * np.cos(twopi_over_L * k) - 2.0 * t2 * np.cos(2.0 * twopi_over_L * k)

    #! plane waves
    phase           = np.empty((ns, ns), dtype=np.complex128)
    for j in range(ns):
        for q in range(ns):
            phase[j, q] = np.exp(1j * twopi_over_L * j * q) / np.sqrt(ns)
    return eig_val, phase

# ---------------------------------------------------------------------

class FreeFermions(QuadraticHamiltonian):
    r"""
    1D tight-binding chain of free fermions.

    .. math::

        H = -\sum_{i} t_i \left( c_i^\dagger c_{i+1} + h.c. \right)
            -\sum_{i} t_{2,i} \left( c_i^\dagger c_{i+2} + h.c. \right)

    Bonds crossing the edge are kept for periodic boundary conditions. For
    uniform hoppings with PBC the spectrum is known analytically:

    .. math::

        \varepsilon_k = -2t \cos\left( \frac{2\pi k}{N_s} \right) - 2t_2 \cos\left( \frac{4\pi k}{N_s} \right)
    """

    _NAME   = "FreeFermions"
    _TYPE   = HamiltonianModels.FREE_FERMIONS

    def __init__(self,
                ns              : Optional[Union[int, "Lattice"]] = None,
                t               : Union["Array", float] = 1.0,
                t2              : Union["Array", float] = 0.0,
                *,
                bc              : Optional[Union[LatticeBC, str]] = None,
                **kwargs):
        super().__init__(ns, **kwargs)
        if bc is None:
            bc = self._lattice.bc if self._lattice is not None else LatticeBC.PBC
        self._bc_type   = LatticeBC.from_str(bc)
        self._t         = self._set_some_coupling(t).astype(self._dtype)
        self._t2        = self._set_some_coupling(t2).astype(self._dtype)
        self._post_init()

    # -----------------------------------------------------------------

    @property
    def bc(self) -> str:            return self._bc_type.name
    @property
    def t(self):                    return self._t
    @t.setter
    def t(self, value):             self._t = self._set_some_coupling(value).astype(self._dtype)
    @property
    def t2(self):                   return self._t2
    @t2.setter
    def t2(self, value):            self._t2 = self._set_some_coupling(value).astype(self._dtype)

    def _info_params(self):
        return [("t", self._t), ("t2", self._t2)]

    # -----------------------------------------------------------------
    #! analytic spectrum
    # -----------------------------------------------------------------

    @property
    def has_analytic_spectrum(self) -> bool:
        uniform = np.allclose(self._t, self._t[0]) and np.allclose(self._t2, self._t2[0]) if self._ns > 0 else False
        return uniform and self._bc_type == LatticeBC.PBC and not self._iscpx

    def analytic_spectrum(self) -> Tuple[np.ndarray, np.ndarray]:
        '''
        Plane-wave eigenpairs of the uniform periodic chain.
        '''
        if not self.has_analytic_spectrum:
            raise ValueError("Analytic spectrum requires uniform real hoppings and periodic boundary conditions.")
        return _free_fermions_spectrum(self._ns, float(self._t[0]), float(self._t2[0]))

    # -----------------------------------------------------------------

    def _hamiltonian_quadratic(self):
        super()._hamiltonian_quadratic()
        ns  = self._ns
        pbc = self._bc_type == LatticeBC.PBC
        for dist, amps in ((1, self._t), (2, self._t2)):
            for i in range(ns):
                j = i + dist
                if j >= ns:
                    if not pbc or ns <= dist:
                        continue
                    j %= ns
                self._hamil_sp[i, j] += -amps[i]
                self._hamil_sp[j, i] += -np.conj(amps[i])

    def __repr__(self):
        return f"FreeFermions(ns={self._ns},t={self._t[0] if self._ns else 0},t2={self._t2[0] if self._ns else 0})"

# ---------------------------------------------------------------------
#! END OF FILE
# ---------------------------------------------------------------------
