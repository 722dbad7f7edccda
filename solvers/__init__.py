"""
Solver registry.

Every module in this package that defines a module-level `ALGORITHM`
instance is imported on package load and registered under
`ALGORITHM.name`, so `get_solver("TwoOpt")` finds solvers/two_opt.py
without a hand-kept list. Names must be unique across modules.
"""
import importlib
import pkgutil
from typing import Dict
from .base import TSPSolver

SOLVERS: Dict[str, TSPSolver] = {}


def load_algorithms() -> None:
    """(Re)build SOLVERS from the modules next to this file."""
    global SOLVERS
    SOLVERS = {}
    package = __name__
    for info in pkgutil.iter_modules(__path__):
        name = info.name
        if name in {"base", "__init__"}:
            continue
        module = importlib.import_module(f"{package}.{name}")
        algo = getattr(module, "ALGORITHM", None)
        if algo is None:
            continue
        if algo.name in SOLVERS:
            raise ValueError(f"Duplicate solver name: {algo.name}")
        SOLVERS[algo.name] = algo


def get_solver(name: str) -> TSPSolver:
    if name not in SOLVERS:
        raise KeyError(f"Unknown solver: {name!r}. Known: {sorted(SOLVERS)}")
    return SOLVERS[name]


load_algorithms()
