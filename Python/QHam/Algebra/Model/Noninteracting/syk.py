"""
file    : Model/Noninteracting/syk.py
Author  : Maksymilian Kliczkowski
Email   : maksymilian.kliczkowski@pwr.edu.pl

Description
-----------
Quadratic SYK model (SYK2): all-to-all random hopping between ``Ns`` modes.
"""

from    typing import Optional, Union, TYPE_CHECKING
import  numpy as np

# import the quadratic base
try:
    from QHam.Algebra.hamil_quadratic           import QuadraticHamiltonian
    from QHam.Algebra.Hamil.hamil_types         import HamiltonianModels
    from QHam.common.ran_wrapper                import RMT, random_matrix

    if TYPE_CHECKING:
        from QHam.Algebra.hilbert               import HilbertSpace
        from QHam.lattices.lattice              import Lattice

except ImportError as e:
    raise ImportError("Could not import QHam module. Ensure that QHam is installed and accessible.") from e

# ---------------------------------------------------------------------
#! HAMILTONIAN
# ---------------------------------------------------------------------

class SYK2(QuadraticHamiltonian):
    r"""
    Quadratic SYK model.

    .. math::
        H = \sum_{i,j} h_{ij} c_i^\dagger c_j, \qquad h = \frac{1}{\sqrt{N_h}} G,

    where :math:`G` is drawn from the Gaussian orthogonal ensemble. The
    matrix is cast to the dtype of the model, so a complex model built
    from the default ensemble has a vanishing imaginary part. Passing
    ``ensemble="GUE"`` (complex dtype only) samples a genuinely complex
    Hermitian matrix instead.

    Every call to :meth:`hamiltonian` draws a new realization from the
    random stream of the model.
    """

    _NAME   = "SYK2"
    _TYPE   = HamiltonianModels.SYK2

    def __init__(self,
                ns              : Optional[Union[int, "Lattice", "HilbertSpace"]] = None,
                *,
                ensemble        : Union[str, RMT]   = RMT.GOE,
                dtype           : np.dtype          = np.dtype(np.float64),
                seed            : Optional[int]     = None,
                **kwargs):
        super().__init__(ns, dtype=dtype, seed=seed, is_sparse=False, **kwargs)
        self._ensemble = RMT.from_str(ensemble)
        if self._ensemble not in (RMT.GOE, RMT.GUE):
            raise ValueError(f"SYK2 couplings are Gaussian, got {self._ensemble.name}.")
        if self._ensemble == RMT.GUE and not self._iscpx:
            raise ValueError("The GUE ensemble requires a complex dtype.")
        self._post_init()

    @property
    def ensemble(self) -> RMT:
        return self._ensemble

    def _info_params(self):
        if self._ensemble == RMT.GUE:
            return [("ens", self._ensemble.name)]
        return []

    def _hamiltonian_quadratic(self):
        """
        Draw the coupling matrix, normalized by the square root of its dimension.
        """
        self._log("Building SYK2 Hamiltonian...", lvl=2, color="green", log='debug')
        nh              = self._nh
        mat             = random_matrix((nh, nh), typek=self._ensemble, rng=self._rng)
        self._hamil_sp  = (mat / np.sqrt(nh)).astype(self._dtype) if nh > 0 else mat.astype(self._dtype)
        self._check_hermitian(self._hamil_sp, what="SYK2 couplings")

    def add_term(self, *args, **kwargs):
        raise NotImplementedError("Add term not implemented for SYK2 model.")

    def set_single_particle_matrix(self, H):
        raise NotImplementedError("Single-particle matrix cannot be set for SYK2 model, the couplings are random.")

    def __repr__(self):
        return f"SYK2(ns={self._ns},cpx={self._iscpx})"

# ---------------------------------------------------------------------
#! END OF HAMILTONIAN
# ---------------------------------------------------------------------
