from cargo_index.core.environment.abc import Environment
from cargo_index.core.environment.real import RealEnvironment

__all__ = [
    "Environment",
    "RealEnvironment",
]
