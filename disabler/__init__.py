from .disabler import (
    Disabler,
    disable_class_method,
    disable_method,
    disabled,
    getDisabler,
    restore_class_method,
    restore_method,
)
from .errors import DisablerError, MethodDisabledError, UnknownOverrideError
from .mixin import MethodDisabling
from .mytype import Scope
from .record import OverrideRecord
from .registry import OverrideRegistry

__version__ = "0.1.0"

__all__ = [
    "Disabler",
    "DisablerError",
    "MethodDisabledError",
    "MethodDisabling",
    "OverrideRecord",
    "OverrideRegistry",
    "Scope",
    "UnknownOverrideError",
    "disable_class_method",
    "disable_method",
    "disabled",
    "getDisabler",
    "restore_class_method",
    "restore_method",
]
