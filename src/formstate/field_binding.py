"""
Capability structs exchanged between FormController and its collaborators.

Each struct is a plain bundle of function references, so a field can be
backed by anything that can hand over five callables and the form owner
never needs the controller object itself:

- FieldApi: what a field exposes to the controller
- Updater: what the controller exposes to fields
- FormApi: what the controller exposes to the form owner
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from formstate.form_state import FormState


@dataclass
class FieldState:
    """Initial value/touched/error supplied when a field registers."""
    value: Any = None
    touched: Any = None
    error: Any = None


@dataclass(frozen=True)
class FieldApi:
    """Callbacks a field collaborator must provide. All five are required."""
    set_value: Callable[[Any], None]
    set_touched: Callable[[Any], None]
    set_error: Callable[[Any], None]
    validate: Callable[[Any], None]
    reset: Callable[[], None]


@dataclass
class FieldBinding:
    """Registry entry: the field's api plus the paths to re-validate on change.

    notify is kept in the given order and may name fields that are not
    mounted yet; those are skipped when the notification runs.
    """
    field_api: FieldApi
    notify: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        self.notify = as_paths(self.notify)


@dataclass(frozen=True)
class Updater:
    """Controller handles given to fields."""
    register: Callable[[str, Optional[FieldState], FieldBinding], None]
    deregister: Callable[[str], None]
    set_value: Callable[..., None]  # (path, value, notify=True)
    set_touched: Callable[[str, Any], None]
    set_error: Callable[[str, Any], None]


@dataclass(frozen=True)
class FormApi:
    """Controller handles given to the form owner.

    The setters delegate to the target field's own FieldApi rather than
    writing the trees directly.
    """
    set_value: Callable[[str, Any], None]
    set_touched: Callable[[str, Any], None]
    set_error: Callable[[str, Any], None]
    get_value: Callable[[str], Any]
    get_touched: Callable[[str], Any]
    get_error: Callable[[str], Any]
    reset: Callable[[], None]
    submit_form: Callable[[Any], None]
    get_state: Callable[[], 'FormState']
    get_values: Callable[[], dict]


def as_paths(notify: Optional[Sequence[str]]) -> Tuple[str, ...]:
    """Normalize a notify argument (None, a single path, or a sequence)."""
    if not notify:
        return ()
    if isinstance(notify, str):
        return (notify,)
    return tuple(notify)
