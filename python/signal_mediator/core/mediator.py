"""Director registry and signal dispatch.

## Dispatch

``signal(handler_def, context, event)`` resolves the handler definition
(see ``definitions``) and broadcasts the result to every registered director
that has a handler with that name:

1. ``context`` is required, ``MissingContextError`` otherwise
2. Bypass definitions are called directly and nothing is dispatched
3. Matching directors are snapshotted, then invoked in registration order
4. No match is a silent no-op unless ``strict_dispatch`` is configured

## Usage Examples

```python
mediator = Mediator()
mediator.register(Director({"save": lambda self, data: store(data)}))
mediator.signal(("save", lambda view, e: e["value"]), view, {"value": 42})
```
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..config import MediatorConfig
from ..exceptions import MissingContextError, UnregisteredDirectorError
from ..logging_config import logger
from .definitions import resolve_definition
from .director import DirectorProtocol


class Mediator:
    """Registry of directors keyed by name, with broadcast dispatch."""

    def __init__(self, config: Optional[MediatorConfig] = None) -> None:
        self.config = config or MediatorConfig.from_env()
        self._directors: Dict[str, DirectorProtocol] = {}

    def __len__(self) -> int:
        return len(self._directors)

    def __contains__(self, key: object) -> bool:
        return key in self._directors

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._directors))

    def register(
        self, director: DirectorProtocol, key: Optional[str] = None
    ) -> "Mediator":
        """Register a director, replacing any director under the same key.

        The replaced director is torn down before the new one is stored.

        Args:
            director: Object implementing the director capability set
            key: Registry key, defaults to ``config.default_key``

        Returns:
            This mediator, for chaining
        """
        key = self._key(key)
        if key in self._directors:
            logger.debug("Replacing director under key '%s'", key)
            self.unregister(key)

        self._directors[key] = director
        logger.info("Director registered: %s -> %s", key, type(director).__name__)
        return self

    def unregister(self, key: Optional[str] = None) -> bool:
        """Tear down and remove the director under a key.

        Returns:
            True if a director was removed, False if the key was not registered
        """
        key = self._key(key)
        director = self._directors.get(key)
        if director is None:
            logger.debug("No director under key '%s' to unregister", key)
            return False

        # Teardown runs while the director is still reachable under its key
        director.teardown()
        del self._directors[key]
        logger.info("Director unregistered: %s", key)
        return True

    def get_director(self, key: Optional[str] = None) -> Optional[DirectorProtocol]:
        """Get the director registered under a key."""
        return self._directors.get(self._key(key))

    def has_director(self, key: Optional[str] = None) -> bool:
        """Check if a director is registered under a key."""
        return self._key(key) in self._directors

    def list_directors(self) -> List[str]:
        """List registered director keys in registration order."""
        return list(self._directors.keys())

    def clear(self) -> None:
        """Unregister every director, tearing each one down."""
        for key in list(self._directors):
            self.unregister(key)

    def signal(self, handler_def: Any, context: Any, event: Any = None) -> "Mediator":
        """Resolve a handler definition and broadcast it to matching directors.

        Args:
            handler_def: Raw handler definition or HandlerDefinition variant
            context: The emitting view/router instance
            event: Triggering event, passed through unexamined

        Returns:
            This mediator, for chaining

        Raises:
            MissingContextError: If context is None
            InvalidDefinitionError: If handler_def matches no known shape
            UnregisteredDirectorError: If strict_dispatch is set and nothing matched
        """
        if context is None:
            raise MissingContextError(f"No context provided for signal {handler_def!r}")

        resolution = resolve_definition(handler_def, context, event)
        if resolution is None:
            return self

        return self.propagate(resolution.handler_name, *resolution.positional())

    def propagate(self, handler_name: str, *args: Any) -> "Mediator":
        """Broadcast an already resolved signal to every matching director.

        Directors registered or removed by a handler during the broadcast do
        not change who receives this signal.

        Raises:
            UnregisteredDirectorError: If strict_dispatch is set and nothing matched
        """
        matching = self._matching_directors(handler_name)

        if not matching:
            if self.config.strict_dispatch:
                raise UnregisteredDirectorError(handler_name, len(self._directors))
            logger.debug("No director handles '%s', signal ignored", handler_name)
            return self

        for key, director in matching:
            handler = director.get_handler(handler_name)
            if handler is None:
                continue
            logger.debug("Dispatching '%s' to director '%s'", handler_name, key)
            handler(*args)

        return self

    def _key(self, key: Optional[str]) -> str:
        return self.config.default_key if key is None else key

    def _matching_directors(
        self, handler_name: str
    ) -> List[Tuple[str, DirectorProtocol]]:
        return [
            (key, director)
            for key, director in self._directors.items()
            if director.has_handler(handler_name)
        ]
