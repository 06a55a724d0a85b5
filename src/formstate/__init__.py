"""
Headless form-state coordination.

Tracks the values, touched flags and validation errors of a changing set of
named fields, derives pristine/dirty/invalid from them, and re-validates
dependent fields when a value changes.

Quick Start:
    >>> from formstate import FormController, Field, SubmitEvent
    >>>
    >>> controller = FormController()
    >>> password = Field('password', controller.updater, notify=['confirm'])
    >>> confirm = Field(
    ...     'confirm', controller.updater,
    ...     validate=lambda v: None if v == controller.get_value('password') else 'mismatch',
    ... )
    >>> password.mount()
    >>> confirm.mount()
    >>>
    >>> confirm.set_value('hunter2')
    >>> password.set_value('hunter2')     # re-validates 'confirm'
    >>> controller.get_error('confirm') is None
    True
    >>> controller.submit_form(SubmitEvent())

Modules:
    - path_store: path parsing and nested dict/list access
    - events: publish/subscribe channel and event names
    - field_binding: FieldApi / FieldBinding / Updater / FormApi structs
    - form_state: FormState snapshot
    - form_controller: FormController
    - field: headless Field collaborator
    - config: FormConfig and the process default
"""

from formstate.path_store import PathStore, parse_path
from formstate.events import CHANGE, VALUE, SUBMIT, EventChannel, SubmitEvent
from formstate.field_binding import FieldApi, FieldBinding, FieldState, FormApi, Updater
from formstate.form_state import FormState
from formstate.config import (
    FormConfig,
    set_default_config,
    get_default_config,
    reset_default_config,
)
from formstate.form_controller import FormController
from formstate.field import Field

__all__ = [
    # Paths
    'PathStore',
    'parse_path',
    # Events
    'CHANGE',
    'VALUE',
    'SUBMIT',
    'EventChannel',
    'SubmitEvent',
    # Capability structs
    'FieldApi',
    'FieldBinding',
    'FieldState',
    'FormApi',
    'Updater',
    # State
    'FormState',
    'FormController',
    'Field',
    # Configuration
    'FormConfig',
    'set_default_config',
    'get_default_config',
    'reset_default_config',
]

__version__ = '1.0.0'
__description__ = 'Headless form-state coordination with path-addressed trees'
