"""Pytest configuration and shared fixtures."""
import pytest

import formstate.config as config_module
from formstate import FieldApi, FieldBinding, FormController


class RecordingField:
    """Field collaborator that records every FieldApi call.

    validate() optionally runs a validator and reports the result through
    the controller's updater, the way a real field would.
    """

    def __init__(self, controller, path, validator=None, reset_value=None, on_reset=None):
        self.controller = controller
        self.path = path
        self.validator = validator
        self.reset_value = reset_value
        self.on_reset = on_reset
        self.calls = []
        self.field_api = FieldApi(
            set_value=lambda value: self._record('set_value', value),
            set_touched=lambda value: self._record('set_touched', value),
            set_error=lambda value: self._record('set_error', value),
            validate=self._validate,
            reset=self._reset,
        )

    def _record(self, name, *args):
        self.calls.append((name,) + args)

    def _validate(self, value):
        self._record('validate', value)
        if self.validator is not None:
            self.controller.set_error(self.path, self.validator(value))

    def _reset(self):
        self._record('reset')
        if self.on_reset is not None:
            self.on_reset()
        self.controller.set_value(self.path, self.reset_value, False)
        self.controller.set_touched(self.path, None)
        self.controller.set_error(self.path, None)

    def calls_to(self, name):
        return [call for call in self.calls if call[0] == name]

    def binding(self, notify=None):
        return FieldBinding(field_api=self.field_api, notify=notify)


@pytest.fixture(autouse=True)
def restore_default_config():
    """Restore the process default config after each test."""
    original = config_module._default_config
    yield
    config_module._default_config = original


@pytest.fixture
def controller():
    """Provide a fresh controller."""
    return FormController()


@pytest.fixture
def make_field(controller):
    """Factory: create a RecordingField and register it on the controller."""
    def factory(path, field_state=None, notify=None, validator=None, reset_value=None, on_reset=None):
        field = RecordingField(controller, path, validator=validator,
                               reset_value=reset_value, on_reset=on_reset)
        controller.register(path, field_state, field.binding(notify))
        return field
    return factory


@pytest.fixture
def events(controller):
    """Record every change/value/submit emission in order."""
    recorded = []
    for name in ('change', 'value', 'submit'):
        controller.on(name, lambda name=name: recorded.append(name))
    return recorded
