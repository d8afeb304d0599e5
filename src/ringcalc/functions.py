"""Registry of scalar functions the driver can sample."""

from __future__ import annotations

import math
from typing import Callable, Dict, List

SampleFunction = Callable[[float], float]

_registry: Dict[str, SampleFunction] = {}


def register_function(name: str, func: SampleFunction) -> None:
    """Register ``func`` under ``name``."""
    if not callable(func):
        raise TypeError(f"{name!r} is not callable")
    _registry[name] = func


def get_function(name: str) -> SampleFunction:
    """Retrieve a sample function by ``name``."""
    return _registry[name]


def available_functions() -> List[str]:
    """Return the list of registered function names."""
    return list(_registry)


def cube(x: float) -> float:
    return x * x * x


register_function("cube", cube)
register_function("square", lambda x: x * x)
register_function("linear", lambda x: x)
register_function("sine", math.sin)
register_function("exp", math.exp)
