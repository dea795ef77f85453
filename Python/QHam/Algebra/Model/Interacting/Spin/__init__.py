"""
Spin Models Module
==================

Interacting spin-1/2 models filled by the compiled Pauli-term kernel.

Modules:
--------
- hamiltonian_spin:
    Base class collecting fields and two-site couplings
- transverse_ising:
    Ising model in a tilted field
- xyz:
    XYZ model with nearest and next-nearest exchange
- heisenberg_kitaev:
    Heisenberg-Kitaev model

------------------------------------------------------------------------
File        : Algebra/Model/Interacting/Spin/__init__.py
Author      : Maksymilian Kliczkowski
Email       : maksymilian.kliczkowski@pwr.edu.pl
------------------------------------------------------------------------
"""

from .hamiltonian_spin  import HamiltonianSpin
from .transverse_ising  import Ising
from .xyz               import XYZ
from .heisenberg_kitaev import HeisenbergKitaev

__all__ = ['HamiltonianSpin', 'Ising', 'XYZ', 'HeisenbergKitaev']

# ----------------------------------------------------------------------
#! End of File
# ----------------------------------------------------------------------
