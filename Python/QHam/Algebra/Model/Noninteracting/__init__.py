"""Non-interacting (quadratic) model definitions.

Modules:
--------
- free_fermions: Tight-binding chain
- aubry_andre: Quasi-periodic chain
- syk: Quadratic Sachdev-Ye-Kitaev model
- plrb: Power-Law Random Banded model

----------------
File            : Algebra/Model/Noninteracting/__init__.py
Author          : Maksymilian Kliczkowski
----------------
"""

from    __future__ import annotations

import  importlib

__all__: list[str] = [
    'aubry_andre', 'free_fermions', 'syk', 'plrb',
    'AubryAndre', 'FreeFermions', 'SYK2', 'PowerLawRandomBanded',
]

_LAZY_MODULES: dict[str, str] = {
    'aubry_andre'           : '.aubry_andre',
    'free_fermions'         : '.free_fermions',
    'syk'                   : '.syk',
    'plrb'                  : '.plrb',
}

_CLASS_MAP: dict[str, str] = {
    'AubryAndre'            : '.aubry_andre',
    'FreeFermions'          : '.free_fermions',
    'SYK2'                  : '.syk',
    'PowerLawRandomBanded'  : '.plrb',
}

def __getattr__(name: str):
    if name in _CLASS_MAP:
        module = importlib.import_module(_CLASS_MAP[name], __name__)
        return getattr(module, name)
    if name in _LAZY_MODULES:
        module = importlib.import_module(_LAZY_MODULES[name], __name__)
        globals()[name] = module
        return module
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_MODULES.keys()) + list(_CLASS_MAP.keys()))
