'''
Implementation of quadratic Hamiltonians.

A quadratic (single-particle) Hamiltonian of ``Ns`` modes

.. math::

    H = \\sum_{i,j} h_{ij} c_i^\\dagger c_j + E_0

is fully specified by the ``Ns x Ns`` Hermitian coupling matrix :math:`h`,
kept in ``hamil_sp`` and distinct from the many-body buffers of interacting
models. The single-particle Hilbert space has dimension ``Nh = Ns``.

A quadratic model can be constructed

    (a) from a lattice,
    (b) from the number of sites only (no lattice),
    (c) from a prebuilt single-particle :class:`HilbertSpace`, either shared
        with the caller or copied (``copy_hilbert=True``).

All three paths leave the model in the same state: ``ns``, ``nh``, the type
tag and the cached descriptive string.

----------------------------------------------------------------------------
file    : QHam/Algebra/hamil_quadratic.py
author  : Maksymilian Kliczkowski
email   : maksymilian.kliczkowski@pwr.edu.pl
date    : 2025-11-01
----------------------------------------------------------------------------
'''

import numpy as np

from typing import Any, List, Optional, Tuple, Union, TYPE_CHECKING
from enum import Enum, unique

try:
    from QHam.Algebra.hamil             import Hamiltonian, Array
    from QHam.Algebra.hilbert           import HilbertSpace
    from QHam.Algebra.Hamil.hamil_types import HamiltonianModels
    from QHam.common.ran_wrapper        import check_hermitian
    if TYPE_CHECKING:
        from QHam.lattices.lattice      import Lattice
except ImportError as e:
    raise ImportError("QHam.Algebra.hamil module is required but not found.") from e

##############################################################################

@unique
class QuadraticTerm(Enum):
    '''
    Types of terms to be added to the quadratic Hamiltonian
    '''
    Onsite  =   0
    Hopping =   1

    @property
    def mode_num(self):
        return 1 if self == QuadraticTerm.Onsite else 2

##############################################################################

class QuadraticHamiltonian(Hamiltonian):
    r"""
    Particle-conserving quadratic Hamiltonian :math:`H = \sum_{ij} h_{ij} c_i^\dagger c_j + E_0`.

    The generic class stores explicitly added terms (:meth:`add_onsite`,
    :meth:`add_hopping`) or a full matrix (:meth:`set_single_particle_matrix`)
    and replays them on every :meth:`hamiltonian` call. Models of the catalog
    override :meth:`_hamiltonian_quadratic`.

    Example
    -------
    >>> ham = QuadraticHamiltonian(ns=4)
    >>> for i in range(3):
    ...     ham.add_hopping(i, i + 1, -1.0)
    >>> h = ham.hamiltonian()       # 4 x 4 tight-binding chain
    """

    _NAME   = "QuadraticHamiltonian"
    _TYPE   = HamiltonianModels.FREE_FERMIONS

    def __init__(self,
                ns              : Optional[Union[int, "Lattice", HilbertSpace]] = None,
                constant        : float                                         = 0.0,
                *,
                lattice         : Optional["Lattice"]                           = None,
                hilbert_space   : Optional[HilbertSpace]                        = None,
                copy_hilbert    : bool                                          = False,
                dtype           : Optional[np.dtype]                            = None,
                is_sparse       : bool                                          = False,
                **kwargs):
        """
        Initialize a Quadratic Hamiltonian.

        Args:
            ns (int, Lattice or HilbertSpace):
                Number of single-particle modes. A lattice or a single-particle
                Hilbert space passed here is treated as the ``lattice`` or
                ``hilbert_space`` argument.
            constant (float):
                Constant energy offset :math:`E_0`, it does not enter the
                single-particle matrix.
            lattice (Lattice):
                Shared lattice (construction path a).
            hilbert_space (HilbertSpace):
                Prebuilt single-particle Hilbert space (construction path c).
            copy_hilbert (bool):
                Store a copy of ``hilbert_space`` instead of sharing it.
            dtype (data-type):
                Matrix data type.
            **kwargs:
                Passed to the base class (e.g., logger, seed, rng).
        """
        ns, lattice, hilbert_space = self._resolve_system(ns, lattice, hilbert_space)
        if hilbert_space is not None and copy_hilbert:
            hilbert_space = hilbert_space.copy()
        kwargs.pop('is_manybody', None)

        super().__init__(is_manybody    =   False,
                        ns              =   ns,
                        lattice         =   lattice,
                        hilbert_space   =   hilbert_space,
                        is_sparse       =   is_sparse,
                        dtype           =   dtype,
                        **kwargs)

        self._constant_offset       = constant
        self._terms                 : List[Tuple[QuadraticTerm, Tuple[int, ...], complex]] = []
        self._sp_matrix             : Optional[np.ndarray] = None

    @staticmethod
    def _resolve_system(ns, lattice, hilbert_space):
        ''' Allow the first positional argument to be a site count, a lattice or a Hilbert space. '''
        if isinstance(ns, HilbertSpace):
            if hilbert_space is not None:
                raise ValueError("Hilbert space given twice.")
            return None, lattice, ns
        if ns is not None and not isinstance(ns, (int, np.integer)) and hasattr(ns, "ns"):
            if lattice is not None:
                raise ValueError("Lattice given twice.")
            return None, ns, hilbert_space
        return ns, lattice, hilbert_space

    # ----------------------------------------------------------------------------------------------

    @classmethod
    def from_hermitian_matrix(cls, hermitian_part: Array, constant: float = 0.0, **kwargs) -> 'QuadraticHamiltonian':
        """
        Create a QuadraticHamiltonian from a Hermitian ``Ns x Ns`` matrix.
        """
        hermitian_part = np.asarray(hermitian_part)
        if hermitian_part.ndim != 2 or hermitian_part.shape[0] != hermitian_part.shape[1]:
            raise ValueError("hermitian_part must be a square matrix")
        kwargs.setdefault('dtype', hermitian_part.dtype if np.iscomplexobj(hermitian_part) else np.float64)
        instance = cls(ns=hermitian_part.shape[0], constant=constant, **kwargs)
        instance.set_single_particle_matrix(hermitian_part)
        instance.update_info()
        return instance

    # ----------------------------------------------------------------------------------------------
    #! Terms
    # ----------------------------------------------------------------------------------------------

    def _check_site(self, site: int):
        if site < 0 or site >= self._ns:
            raise IndexError(f"Site {site} outside of [0, {self._ns}).")

    def add_term(self, term_type: QuadraticTerm, sites: Tuple[int, ...], value: complex):
        '''
        Register a term, it enters the matrix on the next :meth:`hamiltonian` call.
        '''
        if len(sites) != term_type.mode_num:
            raise ValueError(f"{term_type.name} acts on {term_type.mode_num} site(s), got {sites}.")
        for s in sites:
            self._check_site(s)
        if np.iscomplexobj(value) and np.imag(value) != 0 and not self._iscpx:
            raise ValueError("Complex couplings require a complex dtype.")
        if term_type == QuadraticTerm.Onsite and np.imag(value) != 0:
            raise ValueError("Onsite energies must be real.")
        self._terms.append((term_type, tuple(sites), value))

    def add_onsite(self, site: int, value: float):
        self.add_term(QuadraticTerm.Onsite, (site,), value)

    def add_hopping(self, i: int, j: int, value: complex):
        ''' Adds ``value c_i^dag c_j + h.c.`` '''
        if i == j:
            raise ValueError("Hopping requires two different sites, use add_onsite instead.")
        self.add_term(QuadraticTerm.Hopping, (i, j), value)

    def reset_terms(self):
        self._terms     = []
        self._sp_matrix = None

    def set_single_particle_matrix(self, H: Array):
        '''
        Use a full Hermitian matrix as the base of the coupling matrix.
        Terms added later are applied on top of it.
        '''
        H = np.asarray(H)
        if H.shape != (self._ns, self._ns):
            raise ValueError(f"Single-particle matrix must have shape {(self._ns, self._ns)}, got {H.shape}.")
        if not check_hermitian(H):
            raise ValueError("Single-particle matrix must be Hermitian.")
        if np.iscomplexobj(H) and not self._iscpx and np.any(np.imag(H) != 0):
            raise ValueError("Complex matrix requires a complex dtype.")
        self._sp_matrix = np.array(H, dtype=self._dtype)

    # ----------------------------------------------------------------------------------------------
    #! Properties
    # ----------------------------------------------------------------------------------------------

    @property
    def constant(self) -> float:                return self._constant_offset
    @property
    def constant_offset(self) -> float:         return self._constant_offset
    @constant_offset.setter
    def constant_offset(self, value: float):    self._constant_offset = value
    @property
    def terms(self):                            return list(self._terms)

    # ----------------------------------------------------------------------------------------------
    #! Building
    # ----------------------------------------------------------------------------------------------

    def _hamiltonian(self) -> None:
        self._hamiltonian_quadratic()
        self._hamil = self._hamil_sp

    def _hamiltonian_quadratic(self) -> None:
        '''
        Fill ``self._hamil_sp`` (zeroed by :meth:`init`) from the stored terms.
        '''
        if self._sp_matrix is not None:
            self._hamil_sp[:, :] = self._sp_matrix
        for term_type, sites, value in self._terms:
            if term_type == QuadraticTerm.Onsite:
                self._hamil_sp[sites[0], sites[0]] += np.real(value)
            else:
                i, j = sites
                self._hamil_sp[i, j] += value
                self._hamil_sp[j, i] += np.conj(value)

    # ----------------------------------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"QuadraticHamiltonian(ns={self._ns},terms={len(self._terms)},dtype={self._dtype})"

# --------------------------------------------------------------------------------------------------
#! END OF FILE
# --------------------------------------------------------------------------------------------------
