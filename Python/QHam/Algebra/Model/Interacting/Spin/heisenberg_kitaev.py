r"""
The Heisenberg-Kitaev model with
- external magnetic fields h_x, h_z - magnetic field terms in x and z directions,
- Heisenberg coupling J             - isotropic spin interaction,
- Kitaev interactions K_x, K_y, K_z - directional couplings depending on bond orientation,
- anisotropy parameter \Delta       - modifies the zz part of the Heisenberg coupling.

------------------------------------------------------------------------------
File        : Algebra/Model/Interacting/Spin/heisenberg_kitaev.py
Author      : Maksymilian Kliczkowski
Date        : 2025-02-17
Version     : 1.2
------------------------------------------------------------------------------
"""

import numpy as np
from typing import List, Optional, Union

try:
    from QHam.Algebra.Model.Interacting.Spin.hamiltonian_spin   import HamiltonianSpin
    from QHam.Algebra.Hamil.hamil_types                         import HamiltonianModels
    from QHam.lattices.lattice                                  import Lattice
except ImportError as e:
    raise ImportError("Failed to import QHam modules. Ensure that the QHam package is correctly installed.") from e

Coupling = Union[List[float], np.ndarray, float, str, None]

##########################################################################################
#! HAMILTONIAN CLASS
##########################################################################################

class HeisenbergKitaev(HamiltonianSpin):
    r'''
    .. math::

        H = \sum_{\langle i,j \rangle_\gamma} \left[ K_{\gamma,i} \sigma^\gamma_i \sigma^\gamma_j
            + J_i \left( \sigma^x_i \sigma^x_j + \sigma^y_i \sigma^y_j + \Delta_i \sigma^z_i \sigma^z_j \right) \right]
            + \sum_i h_{z,i} \sigma^z_i + h_{x,i} \sigma^x_i

    The label :math:`\gamma \in \{x, y, z\}` of a bond comes from the
    lattice: the honeycomb lattice carries the three Kitaev bond types, a
    chain alternates ``x`` and ``y``. All couplings are site arrays, the
    bond (i, j) uses the entries of its first site.
    '''

    _NAME   = "HeiKit"
    _TYPE   = HamiltonianModels.HEI_KITAEV

    _ERR_LATTICE_NOT_PROVIDED = "HeisenbergKitaev: a lattice (or the number of chain sites) must be provided."

    def __init__(self,
                lattice             : Optional[Lattice] = None,
                K                   : Coupling          = None,
                *,
                Kx                  : Coupling          = None,
                Ky                  : Coupling          = None,
                Kz                  : Coupling          = None,
                J                   : Coupling          = 1.0,
                dlt                 : Coupling          = 1.0,
                hz                  : Coupling          = 0.0,
                hx                  : Coupling          = 0.0,
                **kwargs):
        '''
        Parameters:
            lattice :
                lattice with labelled bonds, a chain of ``ns`` sites when omitted
            K :
                common value of ``Kx, Ky, Kz`` (overridden by the explicit ones)
            Kx, Ky, Kz :
                Kitaev couplings on the x, y and z bonds
            J, dlt :
                Heisenberg exchange and its zz anisotropy
            hz, hx :
                magnetic fields
        '''
        super().__init__(lattice, **kwargs)
        K       = 0.0 if K is None else K
        self._Kx    = self._set_some_coupling(K if Kx is None else Kx).astype(np.float64)
        self._Ky    = self._set_some_coupling(K if Ky is None else Ky).astype(np.float64)
        self._Kz    = self._set_some_coupling(K if Kz is None else Kz).astype(np.float64)
        self._J     = self._set_some_coupling(J).astype(np.float64)
        self._dlt   = self._set_some_coupling(dlt).astype(np.float64)
        self._hz    = self._set_some_coupling(hz).astype(np.float64)
        self._hx    = self._set_some_coupling(hx).astype(np.float64)
        self._post_init()

    # ----------------------------------------------------------------------------------------------

    def set_couplings(self, **kwargs):
        ''' Update any of ``Kx, Ky, Kz, J, dlt, hz, hx``. '''
        for key in ("Kx", "Ky", "Kz", "J", "dlt", "hz", "hx"):
            if kwargs.get(key) is not None:
                setattr(self, f"_{key}", self._set_some_coupling(kwargs[key]).astype(np.float64))

    @property
    def Kx(self) -> np.ndarray:     return self._Kx
    @property
    def Ky(self) -> np.ndarray:     return self._Ky
    @property
    def Kz(self) -> np.ndarray:     return self._Kz
    @property
    def J(self) -> np.ndarray:      return self._J
    @property
    def dlt(self) -> np.ndarray:    return self._dlt
    @property
    def hz(self) -> np.ndarray:     return self._hz
    @property
    def hx(self) -> np.ndarray:     return self._hx

    def _info_params(self):
        return [("Kx", self._Kx), ("Ky", self._Ky), ("Kz", self._Kz),
                ("J", self._J), ("dlt", self._dlt),
                ("hz", self._hz), ("hx", self._hx)]

    # ----------------------------------------------------------------------------------------------

    def _set_local_energy_operators(self):
        super()._set_local_energy_operators()
        kitaev = {"x": self._Kx, "y": self._Ky, "z": self._Kz}
        for i in range(self._ns):
            self.add_field(i, hx=self._hx[i], hz=self._hz[i])
            for j in self._lattice.get_nn_forward(i):
                jxx     = self._J[i]
                jyy     = self._J[i]
                jzz     = self._J[i] * self._dlt[i]
                kind    = self._lattice.bond_type(i, j)
                if kind == "x":
                    jxx += kitaev["x"][i]
                elif kind == "y":
                    jyy += kitaev["y"][i]
                elif kind == "z":
                    jzz += kitaev["z"][i]
                self.add_coupling(i, j, jxx=jxx, jyy=jyy, jzz=jzz)

# ----------------------------------------------------------------------------------------------
#! END OF FILE
# ----------------------------------------------------------------------------------------------
