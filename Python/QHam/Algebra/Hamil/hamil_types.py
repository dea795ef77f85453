"""
Type tags of the models in the catalog.

---------------------------------------------------
File    : QHam/Algebra/Hamil/hamil_types.py
Author  : Maksymilian Kliczkowski
---------------------------------------------------
"""

from enum import Enum, unique
from typing import Union

from QHam.common.errors import HamiltonianConfigurationError

####################################################################################################

@unique
class HamiltonianModels(Enum):
    '''
    Type tag of a Hamiltonian. Interacting (many-body) models come first,
    quadratic ones are listed after ``FREE_FERMIONS``.
    '''
    NONE                        = 0
    # interacting
    ISING                       = 1
    XYZ                         = 2
    HEI_KITAEV                  = 3
    QSM                         = 4
    RP                          = 5
    ULTRAMETRIC                 = 6
    # quadratic
    FREE_FERMIONS               = 100
    AUBRY_ANDRE                 = 101
    SYK2                        = 102
    POWER_LAW_RANDOM_BANDWIDTH  = 103

    # ----------------------------------------------------------------------------------------------

    @property
    def is_quadratic(self) -> bool:
        return self.value >= HamiltonianModels.FREE_FERMIONS.value

    @property
    def is_random(self) -> bool:
        return self in (HamiltonianModels.QSM, HamiltonianModels.RP, HamiltonianModels.ULTRAMETRIC,
                        HamiltonianModels.SYK2, HamiltonianModels.POWER_LAW_RANDOM_BANDWIDTH)

    @staticmethod
    def from_str(name: Union[str, int, "HamiltonianModels"]) -> "HamiltonianModels":
        '''
        Resolve a tag from its name (case insensitive, an optional ``_M``
        suffix is accepted), its value or the tag itself.
        '''
        if isinstance(name, HamiltonianModels):
            return name
        if isinstance(name, int) and not isinstance(name, bool):
            try:
                return HamiltonianModels(name)
            except ValueError as exc:
                raise HamiltonianConfigurationError(f"Unknown model type: {name}") from exc
        key = str(name).strip().upper().replace("-", "_")
        if key.endswith("_M"):
            key = key[:-2]
        key = _ALIASES.get(key, key)
        try:
            return HamiltonianModels[key]
        except KeyError as exc:
            raise HamiltonianConfigurationError(f"Unknown model type: {name}") from exc

_ALIASES = {
    "KITAEV"                    : "HEI_KITAEV",
    "HEISENBERG"                : "HEI_KITAEV",
    "HEISENBERG_KITAEV"         : "HEI_KITAEV",
    "ROSENZWEIG_PORTER"         : "RP",
    "UM"                        : "ULTRAMETRIC",
    "PLRB"                      : "POWER_LAW_RANDOM_BANDWIDTH",
    "AA"                        : "AUBRY_ANDRE",
    "SYK"                       : "SYK2",
    "TFIM"                      : "ISING",
}

# ------------------------------------------------------------------------------------------------
#! EOF
# ------------------------------------------------------------------------------------------------
