"""
XYZ model with nearest and next-nearest neighbor exchange.

--------------------
File    : Model/Interacting/Spin/xyz.py
Author  : Maksymilian Kliczkowski
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

class XYZ(HamiltonianSpin):
    r'''
    .. math::

        H = \sum_{\langle i,j \rangle} J_1 \left[ (1-\eta_1) \sigma^x_i \sigma^x_j + (1+\eta_1) \sigma^y_i \sigma^y_j + \Delta_1 \sigma^z_i \sigma^z_j \right]
          + \sum_{\langle\langle i,j \rangle\rangle} J_2 \left[ (1-\eta_2) \sigma^x_i \sigma^x_j + (1+\eta_2) \sigma^y_i \sigma^y_j + \Delta_2 \sigma^z_i \sigma^z_j \right]
          + \sum_i h_{z,i} \sigma^z_i + h_{x,i} \sigma^x_i

    For :math:`\eta_{1,2} = 0` and vanishing :math:`h_x` the model conserves
    the magnetization and can be restricted to a U(1) sector.
    '''

    _NAME   = "XYZ"
    _TYPE   = HamiltonianModels.XYZ

    def __init__(self,
                lattice         : Optional[Lattice]         = None,
                J1              : float                     = 1.0,
                J2              : float                     = 2.0,
                eta1            : float                     = 0.5,
                eta2            : float                     = 0.5,
                dlt1            : float                     = 0.3,
                dlt2            : float                     = 0.3,
                hz              : Union[List[float], float] = 1.0,
                hx              : Union[List[float], float] = 1.0,
                **kwargs):
        super().__init__(lattice, **kwargs)
        self._J1    = J1
        self._J2    = J2
        self._eta1  = eta1
        self._eta2  = eta2
        self._dlt1  = dlt1
        self._dlt2  = dlt2
        self._hz    = self._set_some_coupling(hz).astype(np.float64)
        self._hx    = self._set_some_coupling(hx).astype(np.float64)
        self._post_init()

    # ----------------------------------------------------------------------------------------------

    def set_couplings(self, **kwargs):
        '''
        Update any of ``J1, J2, eta1, eta2, dlt1, dlt2, hz, hx``.
        '''
        for key in ("J1", "J2", "eta1", "eta2", "dlt1", "dlt2"):
            if kwargs.get(key) is not None:
                setattr(self, f"_{key}", kwargs[key])
        for key in ("hz", "hx"):
            if kwargs.get(key) is not None:
                setattr(self, f"_{key}", self._set_some_coupling(kwargs[key]).astype(np.float64))

    @property
    def J1(self) -> float:          return self._J1
    @property
    def J2(self) -> float:          return self._J2
    @property
    def eta1(self) -> float:        return self._eta1
    @property
    def eta2(self) -> float:        return self._eta2
    @property
    def dlt1(self) -> float:        return self._dlt1
    @property
    def dlt2(self) -> float:        return self._dlt2
    @property
    def hz(self) -> np.ndarray:     return self._hz
    @property
    def hx(self) -> np.ndarray:     return self._hx

    def _info_params(self):
        return [("J1", self._J1), ("J2", self._J2),
                ("eta1", self._eta1), ("eta2", self._eta2),
                ("dlt1", self._dlt1), ("dlt2", self._dlt2),
                ("hz", self._hz), ("hx", self._hx)]

    def _set_local_energy_operators(self):
        super()._set_local_energy_operators()
        for i in range(self._ns):
            self.add_field(i, hx=self._hx[i], hz=self._hz[i])
            for j in self._lattice.get_nn_forward(i):
                self.add_coupling(i, j,
                                jxx = self._J1 * (1.0 - self._eta1),
                                jyy = self._J1 * (1.0 + self._eta1),
                                jzz = self._J1 * self._dlt1)
            for j in self._lattice.get_nnn_forward(i):
                self.add_coupling(i, j,
                                jxx = self._J2 * (1.0 - self._eta2),
                                jyy = self._J2 * (1.0 + self._eta2),
                                jzz = self._J2 * self._dlt2)

# ----------------------------------------------------------------------------------------------
#! END OF FILE
# ----------------------------------------------------------------------------------------------
