"""
Headless field collaborator.

Keeps a local mirror of one field's value/touched/error and reports every
change to a FormController through its updater. Validation rules are not
defined here: a caller-supplied function maps a value to an error (or None
when the value is acceptable).
"""
import logging
from typing import Any, Callable, Optional, Sequence

from formstate.field_binding import FieldApi, FieldBinding, FieldState, Updater, as_paths

logger = logging.getLogger(__name__)


class Field:
    """One named form field, bound to a controller's updater.

    Example:
        >>> from formstate import FormController
        >>> controller = FormController()
        >>> email = Field('user.email', controller.updater,
        ...               validate=lambda v: None if v and '@' in v else 'invalid email',
        ...               validate_on_change=True)
        >>> email.mount()
        >>> email.set_value('nobody')
        >>> controller.get_error('user.email')
        'invalid email'
    """

    def __init__(
        self,
        name: str,
        updater: Updater,
        validate: Optional[Callable[[Any], Any]] = None,
        initial_value: Any = None,
        validate_on_change: bool = False,
        validate_on_blur: bool = False,
        on_value_change: Optional[Callable[[Any], None]] = None,
        notify: Optional[Sequence[str]] = None,
    ):
        """
        Args:
            name: Field path, e.g. "friends[0].name"
            updater: Updater handles of the owning controller
            validate: Maps a value to an error, None meaning valid
            initial_value: Value seeded at mount and restored on reset
            validate_on_change: Validate on every set_value()
            validate_on_blur: Validate when the field becomes touched
            on_value_change: Called with the new value after it is reported
            notify: Paths of fields to re-validate when this value changes
        """
        self.name = name
        self.updater = updater
        self.initial_value = initial_value
        self.validate_on_change = validate_on_change
        self.validate_on_blur = validate_on_blur
        self.notify = as_paths(notify)
        self._validator = validate
        self._on_value_change = on_value_change

        self.value: Any = initial_value
        self.touched: Any = None
        self.error: Any = None

        self.field_api = FieldApi(
            set_value=self.set_value,
            set_touched=self.set_touched,
            set_error=self.set_error,
            validate=self.validate,
            reset=self.reset,
        )

    @property
    def field_state(self) -> FieldState:
        return FieldState(value=self.value, touched=self.touched, error=self.error)

    # === Lifecycle ===

    def mount(self) -> None:
        """Register with the controller using the current local state."""
        self.updater.register(
            self.name,
            self.field_state,
            FieldBinding(field_api=self.field_api, notify=self.notify),
        )

    def unmount(self) -> None:
        self.updater.deregister(self.name)

    # === FieldApi ===

    def set_value(self, value: Any) -> None:
        self.value = value
        if self.validate_on_change:
            self.validate(value)
        self.updater.set_value(self.name, value)
        if self._on_value_change is not None:
            self._on_value_change(value)

    def set_touched(self, touched: Any) -> None:
        self.touched = touched
        if self.validate_on_blur and touched:
            self.validate(self.value)
        self.updater.set_touched(self.name, touched)

    def set_error(self, error: Any) -> None:
        self.error = error
        self.updater.set_error(self.name, error)

    def validate(self, value: Any) -> None:
        """Run the validator and report its result as this field's error."""
        if self._validator is None:
            return
        error = self._validator(value)
        logger.debug(f"Validated {self.name}: error={error!r}")
        self.set_error(error)

    def reset(self) -> None:
        """Restore the initial value and clear touched/error.

        The value is reported with notify=False so resetting a field does not
        re-validate its dependents.
        """
        self.value = self.initial_value
        self.touched = None
        self.error = None
        self.updater.set_value(self.name, self.initial_value, False)
        self.updater.set_touched(self.name, None)
        self.updater.set_error(self.name, None)
