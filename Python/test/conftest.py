"""
Shared fixtures of the QHam test suite.

The package lives in ``Python/``; it is put on the path so that the tests
also run from a plain checkout.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

##########################################################################################

@pytest.fixture
def chain4():
    from QHam.lattices import SquareLattice
    return SquareLattice(dim=1, lx=4, bc="pbc")

@pytest.fixture
def chain6():
    from QHam.lattices import SquareLattice
    return SquareLattice(dim=1, lx=6, bc="pbc")

@pytest.fixture
def rng():
    return np.random.default_rng(1234)

# ----------------------------------------------------------------------------------------------------
#! End of conftest.py
# ----------------------------------------------------------------------------------------------------
