"""
QHam package initialization
===========================

QHam: construction of quantum many-body Hamiltonian matrices over the full
configuration space or over symmetry-restricted sectors.

Usage
-----
    import QHam
    from QHam import HilbertSpace, choose_model

    log     = QHam.get_logger()
    hil     = HilbertSpace(ns=8, global_syms=[QHam.get_u1_sym(ns=8, val=4)])
    model   = choose_model("xyz", hilbert_space=hil, eta1=0.0, eta2=0.0, hx=0.0)
    mat     = model.hamiltonian()

----------------------------------------------------------
Author          : Maksymilian Kliczkowski
Email           : maksymilian.kliczkowski@pwr.edu.pl
Description     : Many-body Hamiltonians with global symmetry sectors.
----------------------------------------------------------
"""

__version__         = "0.1.0"
__author__          = "Maksymilian Kliczkowski"
__email__           = "maksymilian.kliczkowski@pwr.edu.pl"
__description__     = "Many-body Hamiltonians with global symmetry sectors"

__all__ = [
    # --- Convenience API exports (lazy) ---
    "HilbertSpace",
    "HilbertConfig",
    "Hamiltonian",
    "QuadraticHamiltonian",
    "HamiltonianConfig",
    "HAMILTONIAN_REGISTRY",
    "HamiltonianModels",
    "ModelParameters",
    "choose_model",
    "get_u1_sym",
    "get_z2_parity_sym",
    "SquareLattice",
    "HoneycombLattice",
    # Global accessor re-exports
    "get_logger",
    "get_numpy_rng",
    "spawn_numpy_rng",
    "reseed_all",
    # Meta
    "__version__",
    "__author__",
    "__email__",
    "__description__",
]

####################################################################################################

import importlib
from typing import Any, Dict

# Centralized globals (lazy singletons)
from .qham_globals import get_logger, get_numpy_rng, spawn_numpy_rng, reseed_all

# ----------------------------------------------------------------------------
# Lazy access to subpackages and common classes (keeps `import QHam` light)
# ----------------------------------------------------------------------------

_SUBMODULES: Dict[str, str] = {
    'Algebra'               : 'QHam.Algebra',
    'common'                : 'QHam.common',
    'lattices'              : 'QHam.lattices',
}

_API_EXPORTS: Dict[str, str] = {
    'HilbertSpace'          : 'QHam.Algebra.hilbert',
    'HilbertConfig'         : 'QHam.Algebra.hilbert_config',
    'Hamiltonian'           : 'QHam.Algebra.hamil',
    'QuadraticHamiltonian'  : 'QHam.Algebra.hamil_quadratic',
    'HamiltonianConfig'     : 'QHam.Algebra.hamil_config',
    'HAMILTONIAN_REGISTRY'  : 'QHam.Algebra.hamil_config',
    'HamiltonianModels'     : 'QHam.Algebra.Hamil.hamil_types',
    'ModelParameters'       : 'QHam.Algebra.Model.model_params',
    'choose_model'          : 'QHam.Algebra.Model',
    'get_u1_sym'            : 'QHam.Algebra.globals',
    'get_z2_parity_sym'     : 'QHam.Algebra.globals',
    'SquareLattice'         : 'QHam.lattices.square',
    'HoneycombLattice'      : 'QHam.lattices.honeycomb',
}

def __getattr__(name: str) -> Any:  # PEP 562
    if name in _SUBMODULES:
        return importlib.import_module(_SUBMODULES[name])
    if name in _API_EXPORTS:
        mod = importlib.import_module(_API_EXPORTS[name])
        return getattr(mod, name)
    raise AttributeError(f"module 'QHam' has no attribute {name!r}")

# -------------------------------------------------------------------------------------------------
#! End of QHam package initialization
# -------------------------------------------------------------------------------------------------
