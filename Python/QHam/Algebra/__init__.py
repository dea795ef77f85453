"""
QHam Algebra Module
===================

Hilbert spaces, symmetry sectors and Hamiltonians of the QHam package.

Modules:
--------
- globals         : Global symmetry generators and their combinations
- hilbert         : Hilbert spaces and the symmetry sector builder
- hilbert_config  : Declarative Hilbert space blueprints
- hamil           : Hamiltonian model contract
- hamil_quadratic : Quadratic (single-particle) Hamiltonians
- hamil_config    : Hamiltonian blueprints and the model registry
- Model           : Catalog of interacting and quadratic models

File    : QHam/Algebra/__init__.py
Author  : Maksymilian Kliczkowski
Email   : maksymilian.kliczkowski@pwr.edu.pl
"""

from .globals import (
    GlobalSymmetries,
    GlobalSymmetry,
    GlobalSymmetryCombination,
    get_u1_sym,
    get_z2_parity_sym,
    parse_global_syms,
)
from .hilbert import HilbertSpace, ReducedBasis, build_reduced_basis
from .hilbert_config import HilbertConfig
from .hamil import Hamiltonian
from .hamil_quadratic import QuadraticHamiltonian
from .hamil_config import HamiltonianConfig, HamiltonianRegistry, HAMILTONIAN_REGISTRY
from .Hamil.hamil_types import HamiltonianModels

__all__ = [
    'GlobalSymmetries',
    'GlobalSymmetry',
    'GlobalSymmetryCombination',
    'get_u1_sym',
    'get_z2_parity_sym',
    'parse_global_syms',
    'HilbertSpace',
    'ReducedBasis',
    'build_reduced_basis',
    'HilbertConfig',
    'Hamiltonian',
    'QuadraticHamiltonian',
    'HamiltonianConfig',
    'HamiltonianRegistry',
    'HAMILTONIAN_REGISTRY',
    'HamiltonianModels',
]

# ----------------------------------------------------------------------------
