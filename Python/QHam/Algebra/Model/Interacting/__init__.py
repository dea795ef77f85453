"""
Interacting (many-body) models.

- Spin   : Ising, XYZ, Heisenberg-Kitaev
- Random : QSM, Rosenzweig-Porter, Ultrametric
"""

from . import Spin, Random

__all__ = ['Spin', 'Random']
