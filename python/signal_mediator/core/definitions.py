"""Handler definitions and their resolution into dispatchable signals.

A handler definition describes what a signal calls and with which arguments.
Application code usually writes them in one of four raw shapes, which
``coerce_definition`` turns into the matching variant:

```python
"save"                                   # Name
("save", lambda ctx, e: e["value"])      # NameWithArgsFn
{"name": "save", "args": [1, 2]}         # NameWithArgs
lambda ctx, e: ctx.close()               # Bypass
```

The variants can also be constructed directly, which skips shape detection.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

import jmespath
from jmespath.exceptions import JMESPathError
from pydantic import BaseModel

from ..exceptions import InvalidDefinitionError
from ..logging_config import logger

ArgsFn = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Name:
    """Bare handler name; arguments are derived from the triggering event."""

    name: str


@dataclass(frozen=True)
class NameWithArgsFn:
    """Handler name plus a generator called as ``args_fn(context, event)``."""

    name: str
    args_fn: ArgsFn


@dataclass(frozen=True)
class NameWithArgs:
    """Handler name plus a precomputed argument value."""

    name: str
    args: Any


@dataclass(frozen=True)
class Bypass:
    """Raw callable invoked as ``func(context, event)`` without dispatch."""

    func: Callable[[Any, Any], Any]


HandlerDefinition = Union[Name, NameWithArgsFn, NameWithArgs, Bypass]

_VARIANTS = (Name, NameWithArgsFn, NameWithArgs, Bypass)


@dataclass(frozen=True)
class Resolution:
    """A handler name and the arguments it is dispatched with.

    Attributes:
        handler_name: Name looked up on every registered director
        args: A list/tuple spread across parameters, or any other single value
    """

    handler_name: str
    args: Any = ()

    def positional(self) -> Tuple[Any, ...]:
        """Return the positional arguments for the handler call."""
        if isinstance(self.args, (list, tuple)):
            return tuple(self.args)
        return (self.args,)


def coerce_definition(raw: Any) -> HandlerDefinition:
    """Convert a raw handler definition into its variant.

    Shapes are tried in order, first match wins:

    1. ``str`` -> Name
    2. 2-item list/tuple whose second item is callable -> NameWithArgsFn
    3. mapping with truthy ``name`` and truthy ``args`` -> NameWithArgsFn when
       ``args`` is callable, NameWithArgs otherwise
    4. any other callable -> Bypass

    A mapping whose ``args`` is falsy (``0``, ``""``, ``[]``) does not match
    rule 3; use ``NameWithArgs`` directly to pass such values.

    Raises:
        InvalidDefinitionError: If no shape matches
    """
    if isinstance(raw, _VARIANTS):
        return raw

    if isinstance(raw, str):
        return Name(raw)

    if isinstance(raw, (list, tuple)) and len(raw) == 2 and callable(raw[1]):
        name = raw[0]
        if not isinstance(name, str):
            raise InvalidDefinitionError(raw, "handler name must be a string")
        return NameWithArgsFn(name, raw[1])

    if isinstance(raw, Mapping) and raw.get("name") and raw.get("args"):
        name, args = raw["name"], raw["args"]
        if not isinstance(name, str):
            raise InvalidDefinitionError(raw, "handler name must be a string")
        if callable(args):
            return NameWithArgsFn(name, args)
        return NameWithArgs(name, args)

    if callable(raw):
        return Bypass(raw)

    raise InvalidDefinitionError(raw)


def resolve_definition(
    definition: Any, context: Any, event: Any = None
) -> Optional[Resolution]:
    """Resolve a handler definition against a context and event.

    Bypass definitions are invoked here and ``None`` is returned, meaning
    there is nothing left to dispatch.

    Args:
        definition: Raw definition or HandlerDefinition variant
        context: The emitting view/router, passed to generators and bypass functions
        event: Triggering event, opaque to the mediator

    Returns:
        The Resolution to dispatch, or None for a bypass

    Raises:
        InvalidDefinitionError: If the definition matches no shape
    """
    definition = coerce_definition(definition)

    if isinstance(definition, Bypass):
        logger.debug(
            "Bypassing dispatch, calling %s directly",
            getattr(definition.func, "__name__", repr(definition.func)),
        )
        definition.func(context, event)
        return None

    if isinstance(definition, Name):
        args: Any = [event] if event is not None else []
    elif isinstance(definition, NameWithArgsFn):
        args = definition.args_fn(context, event)
    else:
        args = definition.args

    return Resolution(definition.name, args)


def _event_to_data(event: Any) -> Any:
    if isinstance(event, BaseModel):
        return event.model_dump()
    return event


def args_from(*expressions: str) -> ArgsFn:
    """Build an args generator that extracts values from the event with JMESPath.

    One expression yields a single argument, several yield one argument each:

    ```python
    ("rename", args_from("body.id", "body.name"))
    ```

    Raises:
        InvalidDefinitionError: If no expression is given or one fails to compile
    """
    if not expressions:
        raise InvalidDefinitionError(expressions, "args_from needs an expression")

    try:
        compiled = [jmespath.compile(expression) for expression in expressions]
    except JMESPathError as e:
        raise InvalidDefinitionError(expressions, str(e)) from e

    def generate(context: Any, event: Any) -> Any:
        data = _event_to_data(event)
        values: List[Any] = [expression.search(data) for expression in compiled]
        if len(values) == 1:
            return values[0]
        return values

    return generate
