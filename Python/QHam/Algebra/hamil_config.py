"""
Hamiltonian configuration and registry utilities.

This module mirrors the Hilbert space blueprint of
:mod:`QHam.Algebra.hilbert_config`. The models of the catalog are registered
under their lower-case type names together with descriptive metadata and can
be instantiated from lightweight dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Tuple, Union

try:
    from QHam.Algebra.hilbert               import HilbertSpace
    from QHam.Algebra.hilbert_config        import HilbertConfig
    from QHam.Algebra.Hamil.hamil_types     import HamiltonianModels
    from QHam.common.errors                 import HamiltonianConfigurationError
except ImportError as e:
    raise ImportError(
        "Could not import HilbertSpace or HilbertConfig from QHam.Algebra"
    ) from e

if TYPE_CHECKING:
    from .hamil import Hamiltonian

Builder = Callable[["HamiltonianConfig", Dict[str, Any]], "Hamiltonian"]

# ---------------------------------------------------------------------------
#! Registry data structures
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HamiltonianSpec:
    """
    Declarative description of a Hamiltonian builder.

    Parameters
    ----------
    key:
        Unique string key identifying the Hamiltonian type.
    builder:
        Callable that constructs the Hamiltonian instance.
    description:
        One-liner description of the Hamiltonian.
    tags:
        Optional tags for categorization.
    default_kwargs:
        Default keyword arguments for the builder.
    """

    key             : str
    builder         : Builder
    description     : str
    tags            : Tuple[str, ...]       = field(default_factory=tuple)
    default_kwargs  : Mapping[str, Any]     = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key"           : self.key,
            "description"   : self.description,
            "tags"          : self.tags,
            "default_kwargs": dict(self.default_kwargs),
        }

# ---------------------------------------------------------------------------

class HamiltonianRegistry:
    """
    Registry of available Hamiltonian constructions.

    Keys are case insensitive. A key that is not registered directly is
    resolved through the type tags (``"tfim"``, ``"ISING_M"`` or ``1`` all
    name the Ising model).
    """

    def __init__(self) -> None:
        self._registry: Dict[str, HamiltonianSpec] = {}

    # ------------------
    #! registration
    # ------------------

    def register(self,
                key             : str,
                builder         : Builder,
                *,
                description     : str,
                tags            : Tuple[str, ...]               = (),
                default_kwargs  : Optional[Mapping[str, Any]]   = None,
                overwrite       : bool                          = False) -> None:
        """
        Register a new Hamiltonian builder.

        Raises
        ------
        KeyError
            If the key is taken and ``overwrite`` is False.
        """
        key = key.lower()
        if not overwrite and key in self._registry:
            raise KeyError(f"Hamiltonian '{key}' already registered.")

        self._registry[key] = HamiltonianSpec(
            key             = key,
            builder         = builder,
            description     = description,
            tags            = tuple(tags),
            default_kwargs  = default_kwargs or {},
        )

    # ------------------
    #! accessors
    # ------------------

    def _normalize(self, key: Union[str, int, HamiltonianModels]) -> str:
        if isinstance(key, str) and key.lower() in self._registry:
            return key.lower()
        return HamiltonianModels.from_str(key).name.lower()

    def get(self, key: Union[str, int, HamiltonianModels]) -> HamiltonianSpec:
        '''
        Raises
        ------
        HamiltonianConfigurationError
            If the key names no registered model.
        '''
        name = self._normalize(key)
        try:
            return self._registry[name]
        except KeyError as exc:
            raise HamiltonianConfigurationError(f"Hamiltonian '{key}' is not registered.") from exc

    def available(self) -> Tuple[str, ...]:
        return tuple(self._registry.keys())

    def describe(self, key: str) -> Dict[str, Any]:
        return self.get(key).to_dict()

    def __contains__(self, key) -> bool:
        try:
            self.get(key)
        except HamiltonianConfigurationError:
            return False
        return True

    # ------------------
    #! instantiation
    # ------------------

    def instantiate(self, config: "HamiltonianConfig", **overrides: Any) -> "Hamiltonian":
        spec                    = self.get(config.kind)
        params: Dict[str, Any]  = dict(spec.default_kwargs)
        params.update(config.parameters)
        params.update(overrides)
        return spec.builder(config, params)

# Singleton registry instance
HAMILTONIAN_REGISTRY = HamiltonianRegistry()

# ---------------------------------------------------------------------------
#! Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HamiltonianConfig:
    """
    Declarative configuration for a Hamiltonian instance.

    Parameters
    ----------
    kind:
        Key registered in :data:`HAMILTONIAN_REGISTRY` or a type tag.
    hilbert:
        Either a ready-made :class:`HilbertSpace` or a :class:`HilbertConfig`
        blueprint that will be materialised on demand.
    parameters:
        Free-form keyword arguments forwarded to the Hamiltonian builder.
    metadata:
        Optional metadata (ignored by the builder, useful for user tooling).
    """

    kind        : Union[str, HamiltonianModels]
    hilbert     : Optional[Union[HilbertSpace, HilbertConfig]]  = None
    parameters  : Dict[str, Any]                                = field(default_factory=dict)
    metadata    : Dict[str, Any]                                = field(default_factory=dict)

    def with_override(self, **updates: Any) -> "HamiltonianConfig":
        """
        Return a new config with selected fields replaced.
        """
        return replace(self, **updates)

    def resolve_hilbert(self) -> Optional[HilbertSpace]:
        """
        Materialise the Hilbert space if a blueprint was provided.
        """
        if self.hilbert is None:
            return None
        if isinstance(self.hilbert, HilbertSpace):
            return self.hilbert
        if isinstance(self.hilbert, HilbertConfig):
            return HilbertSpace.from_config(self.hilbert)
        raise TypeError(f"Unsupported hilbert specification: {type(self.hilbert)!r}")

    def build(self, **overrides: Any) -> "Hamiltonian":
        return HAMILTONIAN_REGISTRY.instantiate(self, **overrides)

# ---------------------------------------------------------------------------
#! Catalog
# ---------------------------------------------------------------------------

def _catalog_builder(model: HamiltonianModels) -> Builder:
    def _build(config: HamiltonianConfig, params: Dict[str, Any]) -> "Hamiltonian":
        from QHam.Algebra.Model import MODEL_CLASSES
        hilbert = config.resolve_hilbert()
        if hilbert is not None:
            params.setdefault("hilbert_space", hilbert)
        return MODEL_CLASSES[model](**params)
    return _build

_CATALOG = (
    (HamiltonianModels.ISING,                       "Ising model in a tilted field",                        ("spin", "interacting")),
    (HamiltonianModels.XYZ,                         "XYZ chain with nn and nnn exchange",                   ("spin", "interacting")),
    (HamiltonianModels.HEI_KITAEV,                  "Heisenberg-Kitaev model",                              ("spin", "interacting")),
    (HamiltonianModels.QSM,                         "Quantum sun model",                                    ("spin", "interacting", "random")),
    (HamiltonianModels.RP,                          "Rosenzweig-Porter ensemble",                           ("interacting", "random")),
    (HamiltonianModels.ULTRAMETRIC,                 "Ultrametric ensemble",                                 ("interacting", "random")),
    (HamiltonianModels.FREE_FERMIONS,               "Free fermion chain",                                   ("quadratic",)),
    (HamiltonianModels.AUBRY_ANDRE,                 "Aubry-Andre quasi-periodic chain",                     ("quadratic",)),
    (HamiltonianModels.SYK2,                        "Quadratic SYK model",                                  ("quadratic", "random")),
    (HamiltonianModels.POWER_LAW_RANDOM_BANDWIDTH,  "Power-law random banded matrices",                     ("quadratic", "random")),
)

for _model, _description, _tags in _CATALOG:
    HAMILTONIAN_REGISTRY.register(_model.name, _catalog_builder(_model), description=_description, tags=_tags)

# ---------------------------------------------------------------------------
#! EOF
# ---------------------------------------------------------------------------
