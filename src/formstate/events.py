"""
Process-local publish/subscribe channel used by FormController.

Callbacks are kept in a list per event name and called synchronously, in
subscription order, at the point of emission.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, List

logger = logging.getLogger(__name__)

# Event names emitted by FormController
CHANGE = 'change'
VALUE = 'value'
SUBMIT = 'submit'


class EventChannel:
    """Named-event observer registry.

    Listener failures are best-effort by default: logged and skipped so the
    remaining listeners still run. Pass raise_errors=True to propagate them.
    """

    def __init__(self, raise_errors: bool = False):
        self._callbacks: DefaultDict[str, List[Callable[..., None]]] = defaultdict(list)
        self._raise_errors = raise_errors

    @staticmethod
    def _check_name(event: str) -> None:
        if not isinstance(event, str) or not event.strip():
            raise ValueError(f"Event name must be a non-empty string, got {event!r}")

    def on(self, event: str, callback: Callable[..., None]) -> None:
        """Subscribe callback to event. Subscribing twice is a no-op."""
        self._check_name(event)
        if callback not in self._callbacks[event]:
            self._callbacks[event].append(callback)
            logger.debug(f"Connected {event!r} listener: {callback}")

    def off(self, event: str, callback: Callable[..., None]) -> None:
        """Unsubscribe callback from event. Unknown callbacks are ignored."""
        if callback in self._callbacks.get(event, ()):
            self._callbacks[event].remove(callback)
            logger.debug(f"Disconnected {event!r} listener: {callback}")

    def listeners(self, event: str) -> List[Callable[..., None]]:
        """Return a copy of the callbacks subscribed to event."""
        return list(self._callbacks.get(event, ()))

    def emit(self, event: str, *args: Any) -> None:
        """Call every listener of event with args."""
        # Copy so listeners may subscribe/unsubscribe while being notified
        for callback in self.listeners(event):
            try:
                callback(*args)
            except Exception as e:
                if self._raise_errors:
                    raise
                logger.warning(f"Error in {event!r} listener {callback}: {e}")


@dataclass
class SubmitEvent:
    """Minimal submit trigger for headless callers.

    Any object with a prevent_default() method can be passed to
    FormController.submit_form(); this one just records the call.
    """
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True
