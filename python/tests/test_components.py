"""Unit tests for MediatedComponent."""

from unittest.mock import Mock

import pytest

from signal_mediator import Director, InvalidDefinitionError
from signal_mediator.components import MediatedComponent


class EditView(MediatedComponent):
    mediated = {
        "click .save": ("save", lambda view, e: view.form_data()),
        "click .delete": "delete",
        "click .close": lambda view, e: view.hide(e),
    }

    def form_data(self):
        return {"title": "draft"}

    def hide(self, event):
        self.hidden_by = event


class TestMediatedComponent:
    """Test trigger emission through the mediator."""

    def test_emit_uses_component_as_context(self, mediator):
        """Test that args generators receive the component."""
        save = Mock()
        mediator.register(Director({"save": save}))

        EditView(mediator).emit("click .save", "evt")

        save.assert_called_once_with({"title": "draft"})

    def test_emit_string_definition_passes_event(self, mediator):
        """Test that a bare name trigger passes the event."""
        delete = Mock()
        mediator.register(Director({"delete": delete}))

        EditView(mediator).emit("click .delete", "evt")

        delete.assert_called_once_with("evt")

    def test_emit_bypass(self, mediator):
        """Test that bypass triggers call the function with the component."""
        view = EditView(mediator)

        view.emit("click .close", "evt")

        assert view.hidden_by == "evt"

    def test_unknown_trigger(self, mediator):
        """Test that emitting an unbound trigger raises KeyError."""
        with pytest.raises(KeyError):
            EditView(mediator).emit("keyup")

    def test_invalid_definition_fails_at_construction(self, mediator):
        """Test that invalid definitions fail when the component is built."""
        class Broken(MediatedComponent):
            mediated = {"click": 42}

        with pytest.raises(InvalidDefinitionError):
            Broken(mediator)

    def test_delegate_mediated(self, mediator):
        """Test that delegate_mediated returns a callback per trigger."""
        delete = Mock()
        mediator.register(Director({"delete": delete}))

        callbacks = EditView(mediator).delegate_mediated()

        assert set(callbacks) == {"click .save", "click .delete", "click .close"}
        callbacks["click .delete"]("evt")
        delete.assert_called_once_with("evt")

    def test_mediate_propagates_named_signal(self, mediator):
        """Test that mediate broadcasts a name with explicit arguments."""
        notify = Mock()
        mediator.register(Director({"notify": notify}))

        EditView(mediator).mediate("notify", "a", "b")

        notify.assert_called_once_with("a", "b")
