"""Directors hold the named handlers that mediated signals are dispatched to."""

import inspect
import types
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    runtime_checkable,
)

from ..logging_config import logger

HANDLER_NAME_ATTR = "__mediated_handler__"


@runtime_checkable
class DirectorProtocol(Protocol):
    """Capability set the mediator relies on when dispatching to a director."""

    def get_handler(self, name: str) -> Optional[Callable[..., Any]]: ...

    def has_handler(self, name: str) -> bool: ...

    def add_handlers(self, handlers: Mapping[str, Callable[..., Any]]) -> None: ...

    def teardown(self) -> None: ...


def handles(name: Optional[str] = None) -> Callable[..., Any]:
    """Mark a Director method as the handler for a signal name.

    Supports both @handles and @handles("name") syntax; without a name the
    method name is used.
    """
    if callable(name):
        func = name
        setattr(func, HANDLER_NAME_ATTR, func.__name__)
        return func

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        setattr(func, HANDLER_NAME_ATTR, name or func.__name__)
        return func

    return decorator


class Director:
    """Holder of named handler callables.

    Handlers come from three places, later ones overriding earlier ones:
    the class-level ``handlers`` mapping, methods decorated with ``@handles``
    and the ``handlers`` argument. Plain functions in the mapping receive the
    director as their first argument when called.

    Example:
        class Saves(Director):
            @handles("save")
            def save(self, data):
                self.saved = data
    """

    handlers: Dict[str, Callable[..., Any]] = {}

    def __init__(
        self,
        handlers: Optional[Mapping[str, Callable[..., Any]]] = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        # Instance copy so that add_handlers never leaks into the class or siblings
        self.handlers = dict(type(self).handlers)
        self.handlers.update(self._decorated_handlers())
        if handlers:
            self.handlers.update(handlers)
        self.initialize(*args, **kwargs)

    @classmethod
    def _decorated_handlers(cls) -> Dict[str, Callable[..., Any]]:
        marked: Dict[str, str] = {}
        # Walk base classes first so subclasses override inherited handlers
        for klass in reversed(cls.__mro__):
            for attr_name, attr in vars(klass).items():
                name = getattr(attr, HANDLER_NAME_ATTR, None)
                if name is not None and inspect.isfunction(attr):
                    marked[name] = attr_name

        found: Dict[str, Callable[..., Any]] = {}
        for name, attr_name in marked.items():
            # An undecorated override keeps the inherited handler name
            attr = getattr(cls, attr_name, None)
            if not inspect.isfunction(attr):
                continue
            if getattr(attr, HANDLER_NAME_ATTR, name) == name:
                found[name] = attr
        return found

    def initialize(self, *args: Any, **kwargs: Any) -> None:
        """Hook called at the end of construction."""
        pass

    def get_handler(self, name: str) -> Optional[Callable[..., Any]]:
        """Get the handler for a name, bound to this director."""
        handler = self.handlers.get(name)
        if handler is None:
            return None
        if inspect.isfunction(handler):
            return types.MethodType(handler, self)
        return handler

    def has_handler(self, name: str) -> bool:
        """Check if a handler is registered by name."""
        return self.handlers.get(name) is not None

    def add_handlers(self, handlers: Mapping[str, Callable[..., Any]]) -> None:
        """Merge handlers into this director, overwriting same-named entries."""
        self.handlers.update(handlers)
        logger.debug(
            "%s handlers added: %s", type(self).__name__, list(handlers.keys())
        )

    def remove_handler(self, name: str) -> None:
        """Remove a handler by name."""
        self.handlers.pop(name, None)

    def list_handlers(self) -> List[str]:
        """List all handler names."""
        return list(self.handlers.keys())

    def teardown(self) -> None:
        """Hook called by the mediator before this director is removed."""
        pass
