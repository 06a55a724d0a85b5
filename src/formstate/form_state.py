"""
Immutable snapshot of a FormController's trees and derived status.

Captured by FormController.get_form_state(). pristine/dirty/invalid are
computed at capture time from the trees, never stored on the controller.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FormState:
    """Point-in-time view of values, touched, errors and derived flags."""
    values: Dict[str, Any]
    touched: Dict[str, Any]
    errors: Dict[str, Any]
    pristine: bool
    dirty: bool
    invalid: bool

    @property
    def valid(self) -> bool:
        return not self.invalid

    def to_dict(self) -> Dict[str, Any]:
        """Export to a plain dict with the six public keys."""
        return {
            'values': self.values,
            'touched': self.touched,
            'errors': self.errors,
            'pristine': self.pristine,
            'dirty': self.dirty,
            'invalid': self.invalid,
        }
