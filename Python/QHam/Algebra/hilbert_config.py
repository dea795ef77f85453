"""
Declarative configuration helpers for constructing Hilbert spaces.

The :class:`HilbertConfig` dataclass packages all inputs required to create a
:class:`~QHam.Algebra.hilbert.HilbertSpace`, so that sweeps can reuse one
blueprint with small overrides (e.g. changing the U(1) sector).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Tuple

import numpy as np

from .globals import GlobalSymmetry, parse_global_syms

if TYPE_CHECKING:
    from QHam.lattices.lattice import Lattice
    from .hilbert import HilbertSpace

StateFilter = Callable[[int], bool]

@dataclass(frozen=True)
class HilbertConfig:
    """
    Declarative description of a Hilbert space construction recipe.

    ``sectors`` maps generator names to target values (``{"U1": 2}``) and is
    parsed with :func:`~QHam.Algebra.globals.parse_global_syms`; explicit
    ``global_symmetries`` are appended after them.
    """

    ns                  : Optional[int]             = None
    lattice             : Optional["Lattice"]       = None
    is_manybody         : bool                      = True
    sectors             : Mapping[str, float]       = field(default_factory=dict)
    global_symmetries   : Tuple[GlobalSymmetry, ...]= ()
    dtype               : Optional[np.dtype]        = np.float64
    state_filter        : Optional[StateFilter]     = None
    extra_kwargs        : Dict[str, Any]            = field(default_factory=dict)

    def with_override(self, **updates: Any) -> "HilbertConfig":
        """
        Return a new config instance with selected fields replaced.
        """
        return replace(self, **updates)

    def to_kwargs(self) -> Dict[str, Any]:
        """
        Keyword arguments of :class:`HilbertSpace` described by this config.
        """
        syms = parse_global_syms(self.lattice, dict(self.sectors), ns=self.ns) if self.sectors else []
        syms.extend(self.global_symmetries)
        kwargs = dict(
            ns              = self.ns,
            lattice         = self.lattice,
            is_manybody     = self.is_manybody,
            global_syms     = syms,
            dtype           = self.dtype,
            state_filter    = self.state_filter,
        )
        kwargs.update(self.extra_kwargs)
        return kwargs

    def build(self, **overrides: Any) -> "HilbertSpace":
        """
        Instantiate the Hilbert space.
        """
        from .hilbert import HilbertSpace

        kwargs = self.to_kwargs()
        kwargs.update(overrides)
        return HilbertSpace(**kwargs)
