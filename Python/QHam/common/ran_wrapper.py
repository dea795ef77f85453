"""
Random matrix ensembles and random number streams.

Provides
--------
- :class:`RMT`                 : enumeration of the supported ensembles,
- :func:`random_matrix`        : sampler for GOE / GUE / COE / CUE matrices,
- :func:`random_vector`        : coupling vectors from a short string specification,
- :class:`SharedRandomStream`  : a generator that can be shared between models,
                                 every draw is serialized with a lock,
- :func:`check_hermitian`      : tolerance check used to validate sampled matrices.

The Gaussian ensembles are sampled on the upper triangle and mirrored, so the
returned matrices are exactly symmetric (Hermitian) and do not rely on any
later symmetrization.

---------------------------------------------------
File    : QHam/common/ran_wrapper.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from enum import Enum, unique
from typing import Optional, Tuple, Union

import numpy as np
from scipy.stats import unitary_group

from QHam.qham_globals import get_numpy_rng

####################################################################################################

@unique
class RMT(Enum):
    '''
    Random matrix ensembles.
    '''
    GOE = 0     # Gaussian orthogonal
    GUE = 1     # Gaussian unitary
    COE = 2     # circular orthogonal
    CUE = 3     # circular unitary

    @staticmethod
    def from_str(name: Union[str, "RMT"]) -> "RMT":
        if isinstance(name, RMT):
            return name
        try:
            return RMT[str(name).upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown random matrix ensemble: {name}") from exc

####################################################################################################
#! Shared stream
####################################################################################################

class SharedRandomStream:
    '''
    NumPy generator guarded by a reentrant lock.

    Models filling their matrices concurrently may share one stream. Every
    draw goes through the lock, multi-draw sequences (such as sampling a whole
    matrix) should be wrapped in :meth:`atomic` so that they are not
    interleaved with draws of another model.
    '''

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        self._gen   = generator if generator is not None else np.random.default_rng(seed)
        self._lock  = threading.RLock()
        self.seed   = seed

    @contextmanager
    def atomic(self):
        ''' Hold the lock and expose the bare generator. '''
        with self._lock:
            yield self._gen

    def normal(self, *args, **kwargs):
        with self._lock:
            return self._gen.normal(*args, **kwargs)

    def uniform(self, *args, **kwargs):
        with self._lock:
            return self._gen.uniform(*args, **kwargs)

    def integers(self, *args, **kwargs):
        with self._lock:
            return self._gen.integers(*args, **kwargs)

    def random(self, *args, **kwargs):
        with self._lock:
            return self._gen.random(*args, **kwargs)

    def choice(self, *args, **kwargs):
        with self._lock:
            return self._gen.choice(*args, **kwargs)

    def __repr__(self):
        return f"SharedRandomStream(seed={self.seed})"

RandomStream = Union[np.random.Generator, SharedRandomStream]

@contextmanager
def _generator(rng: Optional[RandomStream]):
    if rng is None:
        yield get_numpy_rng()
    elif isinstance(rng, SharedRandomStream):
        with rng.atomic() as gen:
            yield gen
    else:
        yield rng

####################################################################################################
#! Ensembles
####################################################################################################

def _goe(n: int, gen: np.random.Generator) -> np.ndarray:
    '''
    Real symmetric matrix, diagonal ~ N(0, 1), off-diagonal ~ N(0, 1/2).
    '''
    mat             = np.zeros((n, n), dtype=np.float64)
    iu              = np.triu_indices(n, k=1)
    upper           = gen.normal(0.0, np.sqrt(0.5), size=iu[0].shape[0])
    mat[iu]         = upper
    mat[iu[::-1]]   = upper
    mat[np.diag_indices(n)] = gen.normal(0.0, 1.0, size=n)
    return mat

def _gue(n: int, gen: np.random.Generator) -> np.ndarray:
    '''
    Complex Hermitian matrix, diagonal ~ N(0, 1), E|H_ij|^2 = 1/2 off the diagonal.
    '''
    mat             = np.zeros((n, n), dtype=np.complex128)
    iu              = np.triu_indices(n, k=1)
    m               = iu[0].shape[0]
    upper           = (gen.normal(0.0, 0.5, size=m) + 1j * gen.normal(0.0, 0.5, size=m))
    mat[iu]         = upper
    mat[iu[::-1]]   = np.conj(upper)
    mat[np.diag_indices(n)] = gen.normal(0.0, 1.0, size=n)
    return mat

def random_matrix(shape     : Union[int, Tuple[int, int]],
                typek       : Union[str, RMT]               = RMT.GOE,
                rng         : Optional[RandomStream]        = None,
                dtype                                       = None) -> np.ndarray:
    '''
    Sample a random matrix from the chosen ensemble.

    Parameters:
        shape :
            size ``n`` or a square shape ``(n, n)``
        typek :
            ensemble (:class:`RMT` or its name)
        rng :
            numpy generator or :class:`SharedRandomStream`; a fresh generator
            is used when omitted
        dtype :
            output dtype. Real ensembles cast to a complex dtype keep a zero
            imaginary part.
    Returns:
        the sampled matrix
    '''
    if isinstance(shape, (tuple, list)):
        if len(shape) != 2 or shape[0] != shape[1]:
            raise ValueError(f"Random matrix ensembles require a square shape, got {shape}.")
        n = int(shape[0])
    else:
        n = int(shape)
    if n < 0:
        raise ValueError(f"Matrix dimension must be non-negative, got {n}.")

    typek = RMT.from_str(typek)
    with _generator(rng) as gen:
        if typek == RMT.GOE:
            mat = _goe(n, gen)
        elif typek == RMT.GUE:
            mat = _gue(n, gen)
        elif typek == RMT.CUE:
            mat = unitary_group.rvs(n, random_state=gen) if n > 1 else np.exp(2j * np.pi * gen.random((n, n)))
        else:
            u   = unitary_group.rvs(n, random_state=gen) if n > 1 else np.exp(2j * np.pi * gen.random((n, n)))
            mat = u.T @ u

    if dtype is not None:
        dtype = np.dtype(dtype)
        if np.iscomplexobj(mat) and not np.issubdtype(dtype, np.complexfloating):
            raise ValueError(f"Ensemble {typek.name} is complex and cannot be stored as {dtype}.")
        mat = mat.astype(dtype)
    return mat

def random_vector(n         : int,
                typek       : str                       = "uniform",
                rng         : Optional[RandomStream]    = None,
                dtype                                   = np.float64) -> np.ndarray:
    '''
    Random coupling vector described by a short string.

    Accepted forms:
        - ``"uniform"`` / ``"r"``          : U(-1, 1)
        - ``"r;a;b"``                      : U(a, b)
        - ``"normal"`` / ``"n"``           : N(0, 1)
        - ``"n;mu;sigma"``                 : N(mu, sigma)
    '''
    parts   = [p.strip() for p in str(typek).split(";")]
    kind    = parts[0].lower()
    args    = [float(p) for p in parts[1:]]
    with _generator(rng) as gen:
        if kind in ("uniform", "r", "random"):
            lo, hi = (args[0], args[1]) if len(args) >= 2 else (-1.0, 1.0)
            vec = gen.uniform(lo, hi, size=n)
        elif kind in ("normal", "n", "gauss"):
            mu, sig = (args[0], args[1]) if len(args) >= 2 else (0.0, 1.0)
            vec = gen.normal(mu, sig, size=n)
        else:
            raise ValueError(f"Unknown random vector specification: {typek}")
    return vec.astype(dtype)

####################################################################################################
#! Checks
####################################################################################################

def check_hermitian(mat: np.ndarray, rtol: float = 1e-9, atol: float = 1e-12) -> bool:
    '''
    True if ``mat`` equals its conjugate transpose within the tolerances.
    '''
    mat = np.asarray(mat)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False
    return bool(np.allclose(mat, np.conj(mat.T), rtol=rtol, atol=atol))

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
