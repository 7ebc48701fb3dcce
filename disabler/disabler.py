import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Tuple

from .errors import UnknownOverrideError
from .logger import get_logger
from .mytype import Scope
from .record import OverrideRecord
from .registry import OverrideRegistry, find_registry, registry_for
from .typing import is_module

logger = get_logger()


def _scope_for(owner, class_level=False) -> Scope:
    if is_module(owner):
        if class_level:
            raise TypeError(f"Module {owner.__name__} has no class-level methods")
        return Scope.MODULE
    if not isinstance(owner, type):
        raise TypeError(f"Expected a class or module, got {owner!r}")
    return Scope.CLASS if class_level else Scope.INSTANCE


class Disabler:
    """View over the override registries of the owners it has touched.

    The registries themselves live on their owners, one per scope, so two
    tables disabling the same method share one record. A table only tracks
    which registries went through it, for ``records`` and ``restore_all``. The
    module-level helpers work on a process-wide instance (see
    ``getDisabler``); tests can build their own.
    """

    def __init__(self):
        self.registries: Dict[Tuple[object, Scope], OverrideRegistry] = {}
        self._lock = threading.Lock()

    def registry(self, owner, class_level=False) -> OverrideRegistry:
        scope = _scope_for(owner, class_level)
        registry = registry_for(owner, scope)
        with self._lock:
            self.registries[(owner, scope)] = registry
        return registry

    def disable_method(self, owner, method_name: str, message: str = None) -> OverrideRecord:
        return self.registry(owner).disable(method_name, message)

    def restore_method(self, owner, method_name: str) -> OverrideRecord:
        return self._existing(owner, method_name, False).restore(method_name)

    def disable_class_method(self, owner, method_name: str, message: str = None) -> OverrideRecord:
        return self.registry(owner, class_level=True).disable(method_name, message)

    def restore_class_method(self, owner, method_name: str) -> OverrideRecord:
        return self._existing(owner, method_name, True).restore(method_name)

    def is_disabled(self, owner, method_name: str, class_level=False) -> bool:
        registry = find_registry(owner, _scope_for(owner, class_level))
        return registry is not None and registry.is_disabled(method_name)

    def records(self) -> Iterator[OverrideRecord]:
        for registry in list(self.registries.values()):
            yield from registry

    def restore_all(self):
        """Re-enable every disabled method known to this table."""
        restored = 0
        for record in self.records():
            if record.disabled:
                record.restore()
                restored += 1
        logger.debug(f"Restored {restored} disabled method(s)")

    @contextmanager
    def disabled(self, owner, method_name: str, message: str = None, class_level=False):
        """Disable a method for the duration of a ``with`` block.

        On exit the method goes back to the state it had on entry, so nesting
        inside an outer disable keeps it disabled with the outer message.
        """
        registry = self.registry(owner, class_level)
        previous = registry.records.get(method_name)
        was_disabled = previous is not None and previous.disabled
        previous_message = previous.message if was_disabled else None

        record = registry.disable(method_name, message)
        try:
            yield record
        finally:
            if was_disabled:
                record.disable(previous_message)
            else:
                record.restore()

    def _existing(self, owner, method_name, class_level) -> OverrideRegistry:
        registry = find_registry(owner, _scope_for(owner, class_level))
        if registry is None:
            raise UnknownOverrideError(owner, method_name)
        return registry

    def __repr__(self) -> str:
        return f"Disabler<{hex(id(self))}> [{len(self.registries)} registries]"


_global_disabler = Disabler()


def getDisabler() -> Disabler:
    return _global_disabler


def disable_method(owner, method_name: str, message: str = None) -> OverrideRecord:
    """Disable ``owner``'s instance method (or a module's function) ``method_name``.

    Calls raise ``MethodDisabledError`` with ``message``, or
    ``"<Owner>#<method_name> is disabled"`` when no message is given.
    """
    return _global_disabler.disable_method(owner, method_name, message)


def restore_method(owner, method_name: str) -> OverrideRecord:
    return _global_disabler.restore_method(owner, method_name)


def disable_class_method(owner, method_name: str, message: str = None) -> OverrideRecord:
    """Disable a ``classmethod`` or ``staticmethod`` of ``owner``."""
    return _global_disabler.disable_class_method(owner, method_name, message)


def restore_class_method(owner, method_name: str) -> OverrideRecord:
    return _global_disabler.restore_class_method(owner, method_name)


def disabled(owner, method_name: str, message: str = None, class_level=False):
    return _global_disabler.disabled(owner, method_name, message, class_level)
