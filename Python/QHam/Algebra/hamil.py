"""
file : Algebra/hamil.py

High-level Hamiltonian class for the QHam package. This class is used to define the Hamiltonian of
a system. It may be either a many-body Hamiltonian acting on the (possibly symmetry-reduced) space
of ``2^Ns`` configurations or a quadratic Hamiltonian given by an ``Ns x Ns`` single-particle
matrix. The Hamiltonian class is an abstract class and is meant to be inherited by the models of
the catalog.

Every model:
    - builds its matrix in :meth:`Hamiltonian.hamiltonian` (each call overwrites the buffer),
    - describes itself with :meth:`Hamiltonian.info` (a pure function of the parameters),
    - caches that description in :meth:`Hamiltonian.update_info`. Setters do not refresh the
      cache, callers sweeping parameters refresh it when needed.

Author  : Maksymilian Kliczkowski
Email   : maksymilian.kliczkowski@pwr.edu.pl
Date    : 2025-02-01
Version : 1.0.0
"""

import numpy as np
import scipy as sp
import scipy.sparse
import scipy.sparse.linalg
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from QHam.common.flog           import Logger
    from QHam.lattices.lattice      import Lattice

###################################################################################################

try:
    from QHam.Algebra.hilbert               import HilbertSpace
    from QHam.Algebra.hilbert_config        import HilbertConfig
    from QHam.Algebra.Hamil.hamil_types     import HamiltonianModels
    from QHam.common.errors                 import HamiltonianConfigurationError, NumericalInvariantError
    from QHam.common.ran_wrapper            import SharedRandomStream, check_hermitian, random_vector
    from QHam.qham_globals                  import spawn_numpy_rng
except ImportError as exc:
    raise ImportError("QHam.Algebra.hilbert could not be imported. Ensure QHam is properly installed.") from exc

Array = np.ndarray

def _private_rng(seed: Optional[int]) -> np.random.Generator:
    ''' Generator seeded with ``seed``, spawned from the global one when unseeded. '''
    return np.random.default_rng(seed) if seed is not None else spawn_numpy_rng()

####################################################################################################
#! Hamiltonian class - abstract class
####################################################################################################

class Hamiltonian(ABC):
    '''
    A general Hamiltonian class. It owns the matrix buffer, the coupling parameters and the cached
    descriptive string; the lattice and the Hilbert space are shared, read-only collaborators.
    '''

    # Error messages for Hamiltonian class
    _ERR_HAMILTONIAN_NOT_AVAILABLE      = "Hamiltonian matrix is not available. Please build the Hamiltonian first."
    _ERR_HILBERT_SPACE_NOT_PROVIDED     = "Hilbert space is not provided or is invalid. Please supply a valid HilbertSpace object."
    _ERR_NS_NOT_PROVIDED                = "'ns' (number of sites/modes) must be provided, e.g., via 'ns' kwarg or a Lattice object."
    _ERR_NEED_LATTICE                   = "Lattice information is required but not provided."
    _ERR_COUP_VEC_SIZE                  = "Invalid coupling vector size. Coupling must be a scalar, a string, or a list/array of length ns."
    _ERR_MODE_MISMATCH                  = "Operation not supported for the current Hamiltonian mode (Many-Body/Quadratic)."
    _ERR_NOT_HERMITIAN                  = "Sampled matrix is not Hermitian within tolerance."

    # name used in the descriptive string and the model tag, set by subclasses
    _NAME                               = "Hamiltonian"
    _TYPE                               = HamiltonianModels.NONE
    _HERMITICITY_RTOL                   = 1e-9

    # ----------------------------------------------------------------------------------------------
    #! Initialization
    ################################################################################################

    def __init__(self,
                is_manybody     : bool                                          = True,
                *,
                hilbert_space   : Optional[Union[HilbertSpace, HilbertConfig]]  = None,
                ns              : Optional[int]                                 = None,
                lattice         : Optional["Lattice"]                           = None,
                is_sparse       : bool                                          = True,
                dtype           : Optional[Union[str, np.dtype]]                = None,
                logger          : Optional["Logger"]                            = None,
                seed            : Optional[int]                                 = None,
                rng             : Optional[Union[np.random.Generator, SharedRandomStream]] = None,
                model_type      : Optional[Union[str, int, HamiltonianModels]]  = None,
                strict          : Optional[bool]                                = None,
                **kwargs):
        """
        Initialize the Hamiltonian class.

        Parameters
        ----------
        is_manybody : bool, optional
            Many-body (``Nh = 2^Ns`` or reduced) or quadratic (``Ns x Ns``) Hamiltonian.
        hilbert_space : HilbertSpace, HilbertConfig, or None, optional
            The Hilbert space (or a blueprint to build it). Shared with the caller.
        ns : int, optional
            Number of sites/modes, used when neither a Hilbert space nor a lattice is given.
        lattice : Lattice, optional
            Shared lattice.
        is_sparse : bool, optional
            Many-body matrices are stored in CSR format when True.
        dtype : data-type, optional
            Scalar type of the matrix, inferred from the Hilbert space when omitted.
        logger : Logger, optional
            Logging collaborator, the Hilbert space logger when omitted.
        seed : int, optional
            Seed of the private random stream of the model.
        rng : Generator or SharedRandomStream, optional
            Random stream to use instead of a private one.
        model_type : str, int or HamiltonianModels, optional
            Type tag; defaults to the class tag.
        strict : bool, optional
            Raise on invariant violations of sampled matrices (default: when Python runs
            without ``-O``), otherwise such violations are logged.
        **kwargs
            Forwarded to the HilbertSpace constructor (e.g. ``global_syms``).

        Raises
        ------
        HamiltonianConfigurationError
            If the model type is unknown.
        ValueError
            If required information (such as Hilbert space or lattice) is missing or inconsistent.
        """
        if isinstance(hilbert_space, HilbertConfig):
            hilbert_space           = HilbertSpace.from_config(hilbert_space)

        self._type                  = HamiltonianModels.from_str(model_type if model_type is not None else self._TYPE)
        self._is_manybody           = is_manybody
        self._is_quadratic          = not is_manybody
        self._is_sparse             = is_sparse
        self._strict                = __debug__ if strict is None else strict

        self._dtype                 = dtype
        self._hilbert_space         = hilbert_space
        self._logger                = self._hilbert_space.logger if (logger is None and self._hilbert_space is not None) else logger
        self._ns                    = None
        self._lattice               = None

        # random stream (private or shared)
        self._seed                  = seed
        self._rng                   = rng if rng is not None else _private_rng(seed)

        self._handle_system(ns, hilbert_space, lattice, logger, **kwargs)
        self._handle_dtype(dtype)
        if self._logger is None:
            self._logger            = self._hilbert_space.logger

        self._nh                    = self._hilbert_space.nh

        # for the matrix representation of the Hamiltonian
        self._hamil                 : Optional[Union[np.ndarray, sp.sparse.spmatrix]] = None
        self._hamil_sp              : Optional[np.ndarray] = None
        self._info                  : str = ""

    # ----------------------------------------------------------------------------------------------

    @classmethod
    def from_config(cls, config, **overrides) -> "Hamiltonian":
        '''
        Build a model of the catalog from a :class:`HamiltonianConfig`.
        '''
        from QHam.Algebra.hamil_config import HAMILTONIAN_REGISTRY
        return HAMILTONIAN_REGISTRY.instantiate(config, **overrides)

    def _handle_system(self, ns : Optional[int], hilbert_space : Optional[HilbertSpace], lattice : Optional["Lattice"], logger : Optional["Logger"], **kwargs):
        ''' Handle the system configuration. '''
        if hilbert_space is not None:
            self._ns                = hilbert_space.ns
            self._lattice           = hilbert_space.lattice if lattice is None else lattice
            if ns is not None and ns != self._ns:
                raise ValueError(f"Ns mismatch: {ns} != {self._ns}")
            if lattice is not None and lattice.ns != self._ns:
                raise ValueError(f"Ns mismatch: {lattice.ns} != {self._ns}")
            if self._is_manybody != hilbert_space.is_manybody:
                raise ValueError(Hamiltonian._ERR_MODE_MISMATCH)
            return

        if lattice is not None:
            self._ns                = lattice.ns
            self._lattice           = lattice
            if ns is not None and ns != lattice.ns:
                raise ValueError(f"Ns mismatch: {ns} != {lattice.ns}")
        elif ns is not None:
            self._ns                = int(ns)
            self._lattice           = None
        else:
            raise HamiltonianConfigurationError(Hamiltonian._ERR_NS_NOT_PROVIDED)

        self._hilbert_space         = HilbertSpace(ns           = self._ns,
                                                lattice         = self._lattice,
                                                is_manybody     = self._is_manybody,
                                                dtype           = self._dtype if self._dtype is not None else np.float64,
                                                logger          = logger,
                                                **kwargs)

    def _handle_dtype(self, dtype: Optional[Union[str, np.dtype]]):
        '''
        Resolve the scalar type, falling back to the Hilbert space dtype.
        '''
        if dtype is None:
            dtype = getattr(self._hilbert_space, 'dtype', None)
        self._dtype = np.dtype(dtype if dtype is not None else np.float64)
        self._iscpx = np.issubdtype(self._dtype, np.complexfloating)

    def _post_init(self):
        '''
        Called by concrete models once their parameters are set: caches the
        descriptive string and records the construction in the log.
        '''
        self.update_info()
        self._log(f"I am {self._NAME} model: {self._info}", lvl=2, log='info', color='green')

    # ----------------------------------------------------------------------------------------------
    #! Representation - helpers
    ################################################################################################

    def _log(self, msg : str, log : str = 'info', lvl : int = 0, color : str = "white"):
        """
        Log the message through the injected logger.

        Args:
            msg (str) : The message to log.
            log (str) : The logging level. Default is 'info'.
            lvl (int) : The verbosity level of the message.
        """
        if self._logger is None:
            return
        msg = self._logger.colorize(f"[{self._NAME}] {msg}", color)
        self._logger.say(msg, log=log, lvl=lvl)

    @staticmethod
    def _fmt_value(val: Any, prec: int = 2) -> str:
        '''
        Render a parameter with ``prec`` significant digits. Arrays whose
        entries are all equal collapse to a scalar, others render as
        ``[min:max]``.
        '''
        if isinstance(val, (bool, np.bool_)):
            return str(int(val))
        if isinstance(val, str):
            return val
        if isinstance(val, (int, np.integer)):
            return str(int(val))
        if np.isscalar(val):
            if isinstance(val, (complex, np.complexfloating)) and np.imag(val) == 0:
                val = np.real(val)
            return f"{val:.{prec}g}"
        arr = np.asarray(val)
        if arr.size == 0:
            return "[]"
        if np.allclose(arr, arr.flat[0], atol=1e-12, rtol=0):
            return Hamiltonian._fmt_value(arr.flat[0].item(), prec)
        return f"[{Hamiltonian._fmt_value(arr.real.min().item(), prec)}:{Hamiltonian._fmt_value(arr.real.max().item(), prec)}]"

    def _info_params(self) -> List[Tuple[str, Any]]:
        '''
        Ordered ``(name, value)`` pairs entering the descriptive string.
        Overridden by the models.
        '''
        return []

    def _info_name(self, sep: str = "_") -> str:
        return f"{sep}{self._NAME},Ns={self._ns},BC={self.bc}"

    def info(self, skip: Sequence[str] = (), sep: str = "_", prec: int = 2) -> str:
        '''
        Canonical description of the model:
        ``<sep><Name>,Ns=<n>,BC=<bc>[,<sep><param>=<value>]*``.

        Parameters:
            skip :
                names of parameters to leave out
            sep :
                separator placed in front of the name and every parameter
            prec :
                significant digits of the parameter values
        Returns:
            the description, a pure function of the current parameters
        '''
        name = self._info_name(sep)
        for key, val in self._info_params():
            if key in skip:
                continue
            name += f",{sep}{key}={self._fmt_value(val, prec)}"
        return name

    def update_info(self) -> str:
        ''' Recompute and cache the descriptive string. '''
        self._info = self.info()
        return self._info

    def __str__(self):
        return self._info if self._info else self.info()

    def __repr__(self):
        htype = "Many-Body" if self._is_manybody else "Quadratic"
        return f"<{htype} {self._NAME} | Nh={self._nh}, Ns={self._ns}, dtype={self._dtype}, {'sparse' if self._is_sparse else 'dense'}>"

    # ----------------------------------------------------------------------------------------------
    #! Properties
    # ----------------------------------------------------------------------------------------------

    @property
    def name(self) -> str:                      return self._NAME
    @property
    def type(self) -> HamiltonianModels:        return self._type
    @property
    def info_str(self) -> str:                  return self._info
    @property
    def ns(self) -> int:                        return self._ns
    @property
    def Ns(self) -> int:                        return self._ns
    @property
    def nh(self) -> int:                        return self._nh
    @property
    def Nh(self) -> int:                        return self._nh
    @property
    def hilbert_size(self) -> int:              return self._nh
    @property
    def lattice(self) -> Optional["Lattice"]:   return self._lattice
    @property
    def hilbert_space(self) -> HilbertSpace:    return self._hilbert_space
    @property
    def dtype(self) -> np.dtype:                return self._dtype
    @property
    def iscpx(self) -> bool:                    return self._iscpx
    @property
    def is_sparse(self) -> bool:                return self._is_sparse
    @property
    def sparse(self) -> bool:                   return self._is_sparse
    @property
    def is_manybody(self) -> bool:              return self._is_manybody
    @property
    def is_quadratic(self) -> bool:             return self._is_quadratic
    @property
    def rng(self):                              return self._rng
    @property
    def seed(self) -> Optional[int]:            return self._seed
    @property
    def logger(self) -> "Logger":               return self._logger

    @property
    def bc(self) -> str:
        ''' Boundary condition of the lattice, PBC when there is no lattice. '''
        return self._lattice.bc.name if self._lattice is not None else "PBC"

    @property
    def hamil(self) -> Optional[Union[np.ndarray, sp.sparse.spmatrix]]:
        return self._hamil

    @property
    def matrix(self) -> Union[np.ndarray, sp.sparse.spmatrix]:
        ''' Built matrix, raises if :meth:`hamiltonian` was not called yet. '''
        if self._hamil is None:
            raise ValueError(Hamiltonian._ERR_HAMILTONIAN_NOT_AVAILABLE)
        return self._hamil

    @property
    def hamil_sp(self) -> Optional[np.ndarray]:
        return self._hamil_sp

    def reseed(self, seed: Optional[int]) -> None:
        ''' Replace the random stream with a private one seeded with ``seed``. '''
        self._seed  = seed
        self._rng   = _private_rng(seed)

    def set_rng(self, rng: Union[np.random.Generator, SharedRandomStream]) -> None:
        self._rng   = rng

    # ----------------------------------------------------------------------------------------------
    #! Couplings
    # ----------------------------------------------------------------------------------------------

    def _set_some_coupling(self, coupling: Union[list, np.ndarray, float, complex, int, str], size: Optional[int] = None) -> Array:
        '''
        Distinguishes between different initial values for the coupling and returns it.
        One distinguishes between:
            - a full vector of a correct size
            - single value
            - random string (see :func:`random_vector`)
        ---
        Parameters:
            - coupling : some coupling to be set
            - size     : expected length, ``ns`` by default
        ---
        Returns:
            array to be used later with corresponding couplings
        '''
        size = self._ns if size is None else size
        if isinstance(coupling, str):
            return random_vector(size, coupling, rng=self._rng, dtype=np.float64)
        if isinstance(coupling, (float, int, complex, np.number)):
            return np.full(size, coupling)
        arr = np.asarray(coupling)
        if arr.ndim == 1 and arr.shape[0] == size:
            return arr.copy()
        raise ValueError(self._ERR_COUP_VEC_SIZE)

    # ----------------------------------------------------------------------------------------------
    #! Building
    # ----------------------------------------------------------------------------------------------

    def init(self):
        '''
        Prepare an empty buffer of the right shape. The models replace it while filling.
        '''
        if self._ns is None or self._nh is None:
            raise HamiltonianConfigurationError(Hamiltonian._ERR_NS_NOT_PROVIDED)
        self._log("Initializing the Hamiltonian matrix...", lvl=3, log="debug")
        if self._is_quadratic:
            self._hamil_sp  = np.zeros((self._ns, self._ns), dtype=self._dtype)
            self._hamil     = None
        elif self._is_sparse:
            self._hamil     = sp.sparse.csr_matrix((self._nh, self._nh), dtype=self._dtype)
        else:
            self._hamil     = np.zeros((self._nh, self._nh), dtype=self._dtype)

    def hamiltonian(self) -> Union[np.ndarray, sp.sparse.spmatrix]:
        '''
        (Re)build the matrix from the current parameters, lattice and Hilbert space.
        Each call overwrites the previous matrix; random models draw fresh
        couplings from their stream.

        Returns:
            the ``Nh x Nh`` matrix (``Ns x Ns`` for quadratic models)
        Raises:
            HamiltonianConfigurationError if the system size is unknown.
        '''
        self.init()
        self._hamiltonian()
        self._hamiltonian_validate()
        self._log(f"Hamiltonian built with shape {self._hamil.shape}.", lvl=3, log="debug")
        return self._hamil

    build = hamiltonian

    @abstractmethod
    def _hamiltonian(self) -> None:
        ''' Fill ``self._hamil``. '''

    def _hamiltonian_validate(self):
        ''' Check the shape of the freshly built matrix. '''
        if self._hamil is None:
            raise ValueError(Hamiltonian._ERR_HAMILTONIAN_NOT_AVAILABLE)
        expected = (self._ns, self._ns) if self._is_quadratic else (self._nh, self._nh)
        if self._hamil.shape != expected:
            raise ValueError(f"Hamiltonian has shape {self._hamil.shape}, expected {expected}.")

    def _check_hermitian(self, mat: Union[np.ndarray, sp.sparse.spmatrix], what: str = "matrix") -> None:
        '''
        Invariant check of sampled matrices. A violation means the sampling
        routine is broken: it raises in strict mode and is logged otherwise.
        '''
        dense = mat.toarray() if sp.sparse.issparse(mat) else mat
        if check_hermitian(dense, rtol=self._HERMITICITY_RTOL):
            return
        msg = f"{Hamiltonian._ERR_NOT_HERMITIAN} ({what})"
        if self._strict:
            raise NumericalInvariantError(msg)
        self._log(msg, lvl=0, log='error', color='red')

    def _project_to_sector(self, mat: Union[np.ndarray, sp.sparse.spmatrix]) -> Union[np.ndarray, sp.sparse.spmatrix]:
        ''' Restrict a full-space matrix to the reduced basis of the Hilbert space. '''
        if not self._hilbert_space.modifies:
            return mat
        mapping = self._hilbert_space.mapping
        if sp.sparse.issparse(mat):
            return sp.sparse.csr_matrix(mat)[mapping, :][:, mapping]
        return mat[np.ix_(mapping, mapping)]

    def _store(self, mat: Union[np.ndarray, sp.sparse.spmatrix]) -> None:
        ''' Store a many-body matrix in the configured format and dtype. '''
        if self._is_sparse:
            mat = sp.sparse.csr_matrix(mat, dtype=self._dtype)
            mat.eliminate_zeros()
        else:
            mat = mat.toarray() if sp.sparse.issparse(mat) else mat
            mat = np.asarray(mat, dtype=self._dtype)
        self._hamil = mat

    def diagonalize(self, k: Optional[int] = None, which: str = "SA", **kwargs) -> Tuple[np.ndarray, np.ndarray]:
        '''
        Eigenvalues and eigenvectors of the built matrix.

        Full diagonalization goes to ``numpy.linalg.eigh``; with ``k`` given
        the ``k`` extremal pairs of a sparse matrix come from
        ``scipy.sparse.linalg.eigsh``.
        '''
        mat = self.matrix
        if k is not None and sp.sparse.issparse(mat) and k < mat.shape[0] - 1:
            self._log(f"Diagonalizing with eigsh, k={k}...", lvl=3, log='debug')
            return sp.sparse.linalg.eigsh(mat, k=k, which=which, **kwargs)
        dense = mat.toarray() if sp.sparse.issparse(mat) else mat
        self._log("Diagonalizing with eigh...", lvl=3, log='debug')
        return np.linalg.eigh(dense)

    def clear(self):
        '''
        Clears the Hamiltonian matrix. Call :meth:`hamiltonian` again to rebuild it.
        '''
        self._hamil         = None
        self._hamil_sp      = None
        self._log("Hamiltonian cleared...", lvl=3, log='debug')

# --------------------------------------------------------------------------------------------------
#! END OF FILE
# --------------------------------------------------------------------------------------------------
