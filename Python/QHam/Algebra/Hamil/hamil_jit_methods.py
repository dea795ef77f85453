"""
Compiled kernels filling many-body matrices of spin-1/2 models.

A spin model is passed to the kernel as flat arrays of terms written with
Pauli matrices on the bit basis (set bit = spin up, sigma^z = +1):

- single-site terms   ``hx sigma^x_i + hz sigma^z_i``,
- two-site terms      ``jxx sigma^x_i sigma^x_j + jyy sigma^y_i sigma^y_j + jzz sigma^z_i sigma^z_j``.

The kernel loops over basis indices in parallel. Every index owns the slice
``[k * nterms, (k + 1) * nterms)`` of the COO buffers, so threads never write
to the same location. Slots of vanishing terms (or of transitions leaving a
symmetry sector) are left as explicit zeros on the diagonal.

---------------------------------------------------
File    : QHam/Algebra/Hamil/hamil_jit_methods.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from typing import Tuple

import numba
import numpy as np

from QHam.common.binary import flip_jit, flip_two_jit, spin_jit
from QHam.Algebra.hilbert import find_index_jit

_TOL = 1e-14

####################################################################################################

@numba.njit(cache=True)
def _index_of(mapping: np.ndarray, modifies: bool, state: np.int64) -> np.int64:
    if modifies:
        return find_index_jit(mapping, state)
    return state

@numba.njit(cache=True, parallel=True)
def fill_spin_terms(mapping     : np.ndarray,
                    modifies    : bool,
                    nh          : np.int64,
                    site_idx    : np.ndarray,
                    site_x      : np.ndarray,
                    site_z      : np.ndarray,
                    bond_i      : np.ndarray,
                    bond_j      : np.ndarray,
                    bond_xx     : np.ndarray,
                    bond_yy     : np.ndarray,
                    bond_zz     : np.ndarray,
                    rows        : np.ndarray,
                    cols        : np.ndarray,
                    vals        : np.ndarray) -> None:
    '''
    Fill COO buffers of length ``nh * (1 + n_sites + n_bonds)`` with
    ``<new|H|k>`` elements. ``mapping`` is the ascending reduced basis, read
    only when ``modifies`` is set; otherwise the index is the state itself.
    '''
    nsite   = site_idx.shape[0]
    nbond   = bond_i.shape[0]
    nterms  = 1 + nsite + nbond

    for k in numba.prange(nh):
        state   = mapping[k] if modifies else np.int64(k)
        base    = k * nterms
        diag    = 0.0

        for t in range(nsite):
            s               = site_idx[t]
            diag           += site_z[t] * spin_jit(state, s)
            off             = base + 1 + t
            rows[off]       = k
            cols[off]       = k
            vals[off]       = 0.0
            if abs(site_x[t]) > _TOL:
                idx = _index_of(mapping, modifies, flip_jit(state, s))
                if idx >= 0:
                    rows[off]   = idx
                    vals[off]   = site_x[t]

        for b in range(nbond):
            i               = bond_i[b]
            j               = bond_j[b]
            sisj            = spin_jit(state, i) * spin_jit(state, j)
            diag           += bond_zz[b] * sisj
            off             = base + 1 + nsite + b
            rows[off]       = k
            cols[off]       = k
            vals[off]       = 0.0
            # sigma^y_i sigma^y_j flips both spins with amplitude -s_i s_j
            amp             = bond_xx[b] - bond_yy[b] * sisj
            if abs(amp) > _TOL:
                idx = _index_of(mapping, modifies, flip_two_jit(state, i, j))
                if idx >= 0:
                    rows[off]   = idx
                    vals[off]   = amp

        rows[base]  = k
        cols[base]  = k
        vals[base]  = diag

def allocate_coo(nh: int, nsite: int, nbond: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    ''' Buffers for :func:`fill_spin_terms`. '''
    size = nh * (1 + nsite + nbond)
    return np.empty(size, dtype=np.int64), np.empty(size, dtype=np.int64), np.empty(size, dtype=np.float64)

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
