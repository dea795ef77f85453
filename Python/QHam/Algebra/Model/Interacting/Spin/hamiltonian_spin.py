"""Shared spin-1/2 Hamiltonian helpers.

This module provides a lightweight base class for interacting spin models
written as sums of single-site fields and two-site Pauli couplings. Models
register their terms in :meth:`HamiltonianSpin._set_local_energy_operators`,
the base class hands them to the compiled kernel and stores the result.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
import numpy as np
import scipy as sp
import scipy.sparse

try:
    from QHam.Algebra.hamil                     import Hamiltonian
    from QHam.Algebra.Hamil.hamil_jit_methods   import allocate_coo, fill_spin_terms
    from QHam.Algebra.hilbert_config            import HilbertConfig
    from QHam.Algebra.hilbert                   import HilbertSpace
    from QHam.common.errors                     import HamiltonianConfigurationError
    from QHam.lattices.lattice                  import Lattice, LatticeBC
    from QHam.lattices.square                   import SquareLattice
except ImportError as e:
    raise ImportError(
        "This module relies on the Hamiltonian base class and the spin fill kernels from the same package. "
        "Ensure that the package is properly structured and all dependencies are available."
    ) from e

_TOL = 1e-14

# ----------------------------------------------------------------------------
#! HamiltonianSpin: Base class for spin-1/2 Hamiltonians
# ----------------------------------------------------------------------------

class HamiltonianSpin(Hamiltonian):
    """
    Base class for spin-1/2 Hamiltonians on the bit basis (set bit = spin up,
    :math:`\\sigma^z = +1`). All terms are expressed with Pauli matrices.

    Terms flipping a state out of a symmetry sector are dropped, so a model
    restricted to a sector it does not conserve is the projection
    :math:`P H P` of the full matrix.
    """

    def __init__(self, lattice: Optional["Lattice"] = None, *, bc = LatticeBC.PBC, **kwargs):
        '''
        Without a lattice (given directly or through the Hilbert space) the
        model lives on a chain of ``ns`` sites with boundary condition ``bc``.
        '''
        kwargs.pop('is_manybody', None)
        hilbert_space = kwargs.get('hilbert_space')
        if isinstance(hilbert_space, HilbertConfig):
            hilbert_space           = HilbertSpace.from_config(hilbert_space)
            kwargs['hilbert_space'] = hilbert_space
        if lattice is None and hilbert_space is not None:
            lattice = hilbert_space.lattice
        if lattice is None:
            ns = kwargs.pop('ns', None)
            if ns is None and hilbert_space is not None:
                ns = hilbert_space.ns
            if ns is None:
                raise HamiltonianConfigurationError(Hamiltonian._ERR_NS_NOT_PROVIDED)
            lattice = SquareLattice(dim=1, lx=int(ns), bc=bc)
        super().__init__(True, lattice=lattice, **kwargs)
        self._site_terms : List[Tuple[int, float, float]]               = []
        self._bond_terms : List[Tuple[int, int, float, float, float]]   = []

    # ------------------------------------------------------------------------
    #! Terms
    # ------------------------------------------------------------------------

    def _reset_terms(self):
        self._site_terms = []
        self._bond_terms = []

    def add_field(self, site: int, hx: float = 0.0, hz: float = 0.0):
        ''' Adds ``hx sigma^x_site + hz sigma^z_site``. '''
        if abs(hx) < _TOL and abs(hz) < _TOL:
            return
        self._site_terms.append((int(site), float(hx), float(hz)))

    def add_coupling(self, i: int, j: int, jxx: float = 0.0, jyy: float = 0.0, jzz: float = 0.0):
        ''' Adds ``jxx sigma^x_i sigma^x_j + jyy sigma^y_i sigma^y_j + jzz sigma^z_i sigma^z_j``. '''
        if i == j:
            raise ValueError(f"Two-site coupling requires different sites, got {i}.")
        if abs(jxx) < _TOL and abs(jyy) < _TOL and abs(jzz) < _TOL:
            return
        self._bond_terms.append((int(i), int(j), float(jxx), float(jyy), float(jzz)))

    def _set_local_energy_operators(self):
        ''' Register the terms of the model, overridden by the models. '''
        self._reset_terms()

    @property
    def n_terms(self) -> int:
        return len(self._site_terms) + len(self._bond_terms)

    def _term_arrays(self):
        sites           = np.array([t[0] for t in self._site_terms], dtype=np.int64)
        site_x          = np.array([t[1] for t in self._site_terms], dtype=np.float64)
        site_z          = np.array([t[2] for t in self._site_terms], dtype=np.float64)
        bond_i          = np.array([t[0] for t in self._bond_terms], dtype=np.int64)
        bond_j          = np.array([t[1] for t in self._bond_terms], dtype=np.int64)
        bond_xx         = np.array([t[2] for t in self._bond_terms], dtype=np.float64)
        bond_yy         = np.array([t[3] for t in self._bond_terms], dtype=np.float64)
        bond_zz         = np.array([t[4] for t in self._bond_terms], dtype=np.float64)
        return sites, site_x, site_z, bond_i, bond_j, bond_xx, bond_yy, bond_zz

    # ------------------------------------------------------------------------
    #! Building
    # ------------------------------------------------------------------------

    def _hamiltonian(self) -> None:
        self._set_local_energy_operators()
        self._log(f"Filling {self._nh}x{self._nh} matrix with {self.n_terms} terms...", lvl=3, log='debug')
        arrays              = self._term_arrays()
        rows, cols, vals    = allocate_coo(self._nh, arrays[0].shape[0], arrays[3].shape[0])
        fill_spin_terms(self._hilbert_space.mapping, self._hilbert_space.modifies, np.int64(self._nh),
                        *arrays, rows, cols, vals)
        mat                 = sp.sparse.coo_matrix((vals, (rows, cols)), shape=(self._nh, self._nh))
        self._store(mat.tocsr())

# ----------------------------------------------------------------------------
#! End of File
# ----------------------------------------------------------------------------
