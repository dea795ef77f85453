"""
Random Models Module
====================

Interacting models built from random-matrix ensembles.

Modules:
--------
- qsm:
    Quantum sun model (GOE dot coupled to a spin chain)
- rosenzweig_porter:
    Rosenzweig-Porter ensemble
- ultrametric:
    Ultrametric hierarchical ensemble

------------------------------------------------------------------------
File        : Algebra/Model/Interacting/Random/__init__.py
Author      : Maksymilian Kliczkowski
------------------------------------------------------------------------
"""

from .qsm               import QSM
from .rosenzweig_porter import RosenzweigPorter
from .ultrametric       import Ultrametric

__all__ = ['QSM', 'RosenzweigPorter', 'Ultrametric']
