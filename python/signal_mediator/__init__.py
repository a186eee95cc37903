"""Signal mediator.

Views and routers emit named signals instead of calling application logic
directly; registered directors handle them:
- Core: from .core import Mediator, Director, handles
- FastAPI: from .fastapi import MediatedRouter
"""

from .core import (
    Bypass,
    Director,
    DirectorProtocol,
    Mediator,
    Name,
    NameWithArgs,
    NameWithArgsFn,
    args_from,
    handles,
)
from .exceptions import (
    ConfigurationError,
    InvalidDefinitionError,
    MediatorError,
    MissingContextError,
    UnregisteredDirectorError,
)

__version__ = "0.1.0"

__all__ = [
    "Bypass",
    "ConfigurationError",
    "Director",
    "DirectorProtocol",
    "InvalidDefinitionError",
    "Mediator",
    "MediatorError",
    "MissingContextError",
    "Name",
    "NameWithArgs",
    "NameWithArgsFn",
    "UnregisteredDirectorError",
    "args_from",
    "handles",
]
