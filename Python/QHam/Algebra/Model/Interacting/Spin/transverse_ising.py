"""
High-level Hamiltonian class for the Ising model in a tilted field.

--------------------
File    : Model/Interacting/Spin/transverse_ising.py
Author  : Maksymilian Kliczkowski
Date    : 2025-04-26
Version : 0.2
--------------------
"""

import numpy as np
from typing import List, Optional, Union

try:
    from QHam.Algebra.Model.Interacting.Spin.hamiltonian_spin   import HamiltonianSpin
    from QHam.Algebra.Hamil.hamil_types                         import HamiltonianModels
    from QHam.lattices.lattice                                  import Lattice
except ImportError as e:
    raise ImportError("Required QHam modules are not available.") from e

##########################################################################################
#! HAMILTONIAN CLASS
##########################################################################################

class Ising(HamiltonianSpin):
    r'''
    Hamiltonian of the Ising model in a tilted field.

    The Hamiltonian is defined as:
        H = \sum_{\langle i,j \rangle} J_i \sigma^z_i \sigma^z_j + \sum_i h_{z,i} \sigma^z_i + \sum_i h_{x,i} \sigma^x_i

    where:
        - \sigma^z_i, \sigma^x_i are Pauli operators at site i,
        - \langle i,j \rangle runs over forward nearest neighbors of the lattice,
          the bond (i, j) carries the coupling of its first site.
    '''

    _NAME   = "Ising"
    _TYPE   = HamiltonianModels.ISING

    def __init__(self,
                lattice             : Optional[Lattice]         = None,
                J                   : Union[List[float], float] = 1.0,
                hz                  : Union[List[float], float] = 1.0,
                hx                  : Union[List[float], float] = 1.0,
                **kwargs):
        '''
        Parameters:
            lattice :
                lattice defining the neighbors, a chain of ``ns`` sites when omitted
            J :
                Ising coupling(s), scalar, array of length ns or random string
            hz :
                perpendicular field(s)
            hx :
                transverse field(s)
        '''
        super().__init__(lattice, **kwargs)
        self.set_couplings(J=J, hz=hz, hx=hx)
        self._post_init()

    # ----------------------------------------------------------------------------------------------
    #! INIT / SETTERS
    # ----------------------------------------------------------------------------------------------

    def set_couplings(self, J = None, hz = None, hx = None):
        '''
        Sets or updates the couplings. ``None`` keeps the current value.
        The cached descriptive string is not refreshed, call :meth:`update_info`.
        '''
        if J is not None:
            self._J     = self._set_some_coupling(J).astype(np.float64)
        if hz is not None:
            self._hz    = self._set_some_coupling(hz).astype(np.float64)
        if hx is not None:
            self._hx    = self._set_some_coupling(hx).astype(np.float64)

    @property
    def J(self) -> np.ndarray:      return self._J
    @property
    def hz(self) -> np.ndarray:     return self._hz
    @property
    def hx(self) -> np.ndarray:     return self._hx

    def _info_params(self):
        return [("J", self._J), ("hz", self._hz), ("hx", self._hx)]

    def _set_local_energy_operators(self):
        super()._set_local_energy_operators()
        for i in range(self._ns):
            self.add_field(i, hx=self._hx[i], hz=self._hz[i])
            for j in self._lattice.get_nn_forward(i):
                self.add_coupling(i, j, jzz=self._J[i])

# ----------------------------------------------------------------------------------------------
#! END OF FILE
# ----------------------------------------------------------------------------------------------
