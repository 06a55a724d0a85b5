"""
Controller configuration and the process-wide default.

FormController reads the default at construction time when no explicit
config is passed; changing the default later does not affect existing
controllers.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FormConfig:
    """Options for FormController.

    Attributes:
        copy_state: Deep-copy the trees into get_form_state() snapshots.
                    False hands out live references to the controller's trees.
        raise_listener_errors: Propagate exceptions raised by event listeners
                               instead of logging them and moving on.
    """
    copy_state: bool = True
    raise_listener_errors: bool = False


_default_config: FormConfig = FormConfig()


def set_default_config(config: FormConfig) -> None:
    """Set the config used by controllers created without one."""
    global _default_config
    _default_config = config


def get_default_config() -> FormConfig:
    return _default_config


def reset_default_config() -> None:
    """Restore the built-in defaults."""
    set_default_config(FormConfig())


def resolve_config(config: Optional[FormConfig]) -> FormConfig:
    return config if config is not None else _default_config
