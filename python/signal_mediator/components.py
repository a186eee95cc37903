"""Mediated components: views that emit signals instead of calling logic."""

from typing import Any, Callable, Dict

from .core import Mediator, coerce_definition
from .logging_config import logger


class MediatedComponent:
    """Base class for views whose triggers are mediated.

    ``mediated`` maps trigger keys (e.g. ``"click .save"``) to handler
    definitions. Each definition is signalled with the component as context:

        class EditView(MediatedComponent):
            mediated = {
                "click .save": ("save", lambda view, e: view.form_data()),
                "click .close": lambda view, e: view.hide(),
            }

        EditView(mediator).emit("click .save", event)
    """

    mediated: Dict[str, Any] = {}

    def __init__(self, mediator: Mediator) -> None:
        self.mediator = mediator
        # Fail at construction rather than on the first trigger
        self._definitions = {
            trigger: coerce_definition(definition)
            for trigger, definition in self.mediated.items()
        }

    def emit(self, trigger: str, event: Any = None) -> None:
        """Signal the handler definition bound to a trigger.

        Raises:
            KeyError: If no definition is bound to the trigger
        """
        definition = self._definitions[trigger]
        logger.debug("[%s] %s triggered", type(self).__name__, trigger)
        self.mediator.signal(definition, self, event)

    def delegate_mediated(self) -> Dict[str, Callable[..., None]]:
        """Map each trigger to a callback for a host event system to bind."""

        def callback_for(trigger: str) -> Callable[..., None]:
            def callback(event: Any = None) -> None:
                self.emit(trigger, event)

            return callback

        return {trigger: callback_for(trigger) for trigger in self._definitions}

    def mediate(self, name: str, *args: Any) -> None:
        """Broadcast a named signal with explicit arguments."""
        self.mediator.propagate(name, *args)
