"""
FormController: the form's single source of truth.

Holds three nested trees (values, touched, errors) addressed by path
strings, a registry of mounted fields keyed by path, and an event channel.
Fields register themselves through the updater surface and report every
change back through it; the controller calls into each field's FieldApi to
validate or reset it.

Execution model: single-threaded and re-entrant. A field's validate() or
reset() may call straight back into set_value()/set_error() while the
controller is still inside a fan-out. There is no lock and no batching, so
every mutation emits its own 'change' event.
"""
import copy
import logging
from typing import Any, Callable, Dict, Iterator, Optional, Set, Tuple

from formstate.config import FormConfig, resolve_config
from formstate.events import CHANGE, SUBMIT, VALUE, EventChannel
from formstate.field_binding import FieldBinding, FieldState, FormApi, Updater
from formstate.form_state import FormState
from formstate.path_store import PathStore

logger = logging.getLogger(__name__)


class FormController:
    """Coordinates field registration, state trees and validation triggers.

    Everything else is derived:
    - pristine -> touched and values trees are both empty
    - dirty -> not pristine
    - invalid -> errors tree is non-empty
    """

    def __init__(self, config: Optional[FormConfig] = None):
        self.config = resolve_config(config)

        # Key: field path, e.g. "foo.bar[3].baz". Insertion order is the
        # order used by submit_form() and reset().
        self._fields: Dict[str, FieldBinding] = {}

        self.values: Dict[str, Any] = {}
        self.touched: Dict[str, Any] = {}
        self.errors: Dict[str, Any] = {}

        self._events = EventChannel(raise_errors=self.config.raise_listener_errors)

        self.updater = Updater(
            register=self.register,
            deregister=self.deregister,
            set_value=self.set_value,
            set_touched=self.set_touched,
            set_error=self.set_error,
        )

    # ========== SUBSCRIPTION ==========

    def on(self, event: str, callback: Callable[..., None]) -> None:
        """Subscribe to 'change', 'value' or 'submit'."""
        self._events.on(event, callback)

    def off(self, event: str, callback: Callable[..., None]) -> None:
        self._events.off(event, callback)

    def emit(self, event: str, *args: Any) -> None:
        self._events.emit(event, *args)

    # ========== REGISTRY ==========

    @property
    def fields(self) -> Dict[str, FieldBinding]:
        """Copy of the registry, path -> binding."""
        return dict(self._fields)

    def is_registered(self, path: str) -> bool:
        return path in self._fields

    def _walk_registry(self) -> Iterator[Tuple[str, FieldBinding]]:
        """Yield (path, binding) in registration order against the live registry.

        Callbacks run during the walk may change the registry: a field removed
        before its turn is skipped, a field added during the walk is still
        visited, and no path is visited twice.
        """
        visited: Set[str] = set()
        found = True
        while found:
            found = False
            for path, binding in list(self._fields.items()):
                if path in visited or self._fields.get(path) is not binding:
                    continue
                visited.add(path)
                found = True
                yield path, binding

    # ========== UPDATER SURFACE (used by fields) ==========

    def register(self, path: str, field_state: Optional[FieldState], binding: FieldBinding) -> None:
        """Add a field to the registry and seed its state.

        Seeding goes through set_value(notify=False) so that mounting a field
        never triggers validation of its dependents. Registering a path that
        is already registered replaces the binding.
        """
        if path in self._fields:
            logger.debug(f"Overwriting existing registration for field: {path}")
        else:
            logger.debug(f"Register field: {path}")

        self._fields[path] = binding

        state = field_state if field_state is not None else FieldState()
        self.set_value(path, state.value, notify=False)
        self.set_touched(path, state.touched)
        self.set_error(path, state.error)

    def deregister(self, path: str) -> None:
        """Drop a field and purge its value/touched/error subtrees."""
        if self._fields.pop(path, None) is None:
            logger.debug(f"Deregister called for unregistered field: {path}")
        else:
            logger.debug(f"Deregister field: {path}")

        PathStore.delete(self.values, path)
        PathStore.delete(self.errors, path)
        PathStore.delete(self.touched, path)
        self.emit(CHANGE)

    def set_value(self, path: str, value: Any, notify: bool = True) -> None:
        """Write a value, emit 'change' and 'value', then notify dependents."""
        PathStore.set(self.values, path, value)
        self.emit(CHANGE)
        self.emit(VALUE)
        if notify:
            self.notify(path)

    def set_touched(self, path: str, value: Any) -> None:
        PathStore.set(self.touched, path, value)
        self.emit(CHANGE)

    def set_error(self, path: str, value: Any) -> None:
        PathStore.set(self.errors, path, value)
        self.emit(CHANGE)

    def notify(self, path: str) -> None:
        """Re-validate every field listed in path's notify list.

        One level only: a dependent's validation does not in turn notify its
        own dependents unless it writes a value through set_value(). Targets
        that are not registered are skipped. Repeats and cycles are not
        filtered.
        """
        notifier = self._fields.get(path)
        if notifier is None or not notifier.notify:
            return

        for target in notifier.notify:
            to_notify = self._fields.get(target)
            if to_notify is None:
                logger.debug(f"Skipping notify {path} -> {target}: field not registered")
                continue
            logger.debug(f"Notifying {target} (from {path})")
            to_notify.field_api.validate(self.get_value(target))

    # ========== READS ==========

    def get_value(self, path: str) -> Any:
        return PathStore.get(self.values, path)

    def get_touched(self, path: str) -> Any:
        return PathStore.get(self.touched, path)

    def get_error(self, path: str) -> Any:
        return PathStore.get(self.errors, path)

    def valid(self) -> bool:
        return PathStore.empty(self.errors)

    def invalid(self) -> bool:
        return not PathStore.empty(self.errors)

    def pristine(self) -> bool:
        return PathStore.empty(self.touched) and PathStore.empty(self.values)

    def dirty(self) -> bool:
        return not self.pristine()

    # ========== FORM OPERATIONS ==========

    def reset(self) -> None:
        """Ask every registered field to reset itself.

        The trees are not cleared here. Each field reports its own reset
        state back through the updater, so the effect on values/touched/
        errors is entirely a side effect of the fan-out.
        """
        logger.debug(f"Resetting {len(self._fields)} field(s)")
        for _, binding in self._walk_registry():
            binding.field_api.reset()
        self.emit(CHANGE)

    def submit_form(self, event: Any = None) -> None:
        """Validate every field and emit 'submit' if the form ends up valid.

        Args:
            event: Triggering event; its prevent_default() is called first.
                   None skips that step for programmatic submission.
        """
        if event is not None:
            event.prevent_default()

        for path, binding in self._walk_registry():
            binding.field_api.validate(self.get_value(path))

        self.emit(CHANGE)

        if self.valid():
            logger.debug(f"Submit: {self.values}")
            self.emit(SUBMIT)
        else:
            logger.debug(f"Submit blocked by errors: {self.errors}")

    # ========== EXTERNAL VIEWS ==========

    def get_form_state(self) -> FormState:
        """Snapshot of the trees plus freshly computed derived flags."""
        copy_tree = copy.deepcopy if self.config.copy_state else (lambda tree: tree)
        return FormState(
            values=copy_tree(self.values),
            touched=copy_tree(self.touched),
            errors=copy_tree(self.errors),
            pristine=self.pristine(),
            dirty=self.dirty(),
            invalid=self.invalid(),
        )

    def get_form_api(self) -> FormApi:
        """Build the handle set exposed to the form owner."""

        def delegate(setter_name: str) -> Callable[[str, Any], None]:
            def setter(path: str, value: Any) -> None:
                binding = self._fields.get(path)
                if binding is None:
                    logger.debug(f"Form api {setter_name}({path!r}) ignored: field not registered")
                    return
                getattr(binding.field_api, setter_name)(value)
            return setter

        return FormApi(
            set_value=delegate('set_value'),
            set_touched=delegate('set_touched'),
            set_error=delegate('set_error'),
            get_value=self.get_value,
            get_touched=self.get_touched,
            get_error=self.get_error,
            reset=self.reset,
            submit_form=self.submit_form,
            get_state=self.get_form_state,
            get_values=lambda: self.get_form_state().values,
        )
