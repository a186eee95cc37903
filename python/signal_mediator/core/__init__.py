"""Signal dispatch engine: handler definitions, directors and the mediator."""

from .definitions import (
    Bypass,
    HandlerDefinition,
    Name,
    NameWithArgs,
    NameWithArgsFn,
    Resolution,
    args_from,
    coerce_definition,
    resolve_definition,
)
from .director import Director, DirectorProtocol, handles
from .mediator import Mediator

__all__ = [
    "Bypass",
    "Director",
    "DirectorProtocol",
    "HandlerDefinition",
    "Mediator",
    "Name",
    "NameWithArgs",
    "NameWithArgsFn",
    "Resolution",
    "args_from",
    "coerce_definition",
    "handles",
    "resolve_definition",
]
