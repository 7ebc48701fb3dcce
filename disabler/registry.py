import threading
from typing import Dict, Iterator

from .errors import UnknownOverrideError
from .mytype import Scope
from .record import OverrideRecord, intercepting_record


class OverrideRegistry:
    """The override records of one owner, keyed by method name.

    Records are created on the first ``disable`` of a name and never
    removed; ``restore`` only flips the record back to enabled.
    """

    def __init__(self, owner, scope: Scope = Scope.INSTANCE):
        self.owner = owner
        self.scope = scope
        self.records: Dict[str, OverrideRecord] = {}
        self._lock = threading.Lock()

    def disable(self, method_name: str, message: str = None) -> OverrideRecord:
        with self._lock:
            record = self.records.get(method_name)
            if record is None:
                record = self._installed(method_name)
            if record is None:
                # Construction installs the interception and disables it
                record = OverrideRecord(self.owner, method_name, message, scope=self.scope)
                self.records[method_name] = record
                return record
        record.disable(message)
        return record

    def _installed(self, method_name: str):
        """Adopt a record already installed on the owner outside this registry."""
        record = intercepting_record(vars(self.owner).get(method_name))
        if record is None or record.owner is not self.owner or record.scope is not self.scope:
            return None
        self.records[method_name] = record
        return record

    def restore(self, method_name: str) -> OverrideRecord:
        record = self[method_name]
        record.restore()
        return record

    def is_disabled(self, method_name: str) -> bool:
        record = self.records.get(method_name)
        return record is not None and record.disabled

    def __getitem__(self, method_name: str) -> OverrideRecord:
        try:
            return self.records[method_name]
        except KeyError:
            raise UnknownOverrideError(self.owner, method_name) from None

    def __contains__(self, method_name) -> bool:
        return method_name in self.records

    def __iter__(self) -> Iterator[OverrideRecord]:
        return iter(list(self.records.values()))

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return f"OverrideRegistry<{self.owner!r} {self.scope} {list(self.records)}>"


REGISTRIES_ATTR = "__disabler_registries__"
_registries_lock = threading.Lock()


def find_registry(owner, scope: Scope = Scope.INSTANCE):
    """The registry stored on ``owner`` for ``scope``, or None. Inherited registries are ignored."""
    registries = vars(owner).get(REGISTRIES_ATTR)
    if registries is None:
        return None
    return registries.get(scope)


def registry_for(owner, scope: Scope = Scope.INSTANCE) -> OverrideRegistry:
    """Fetch or create the registry kept on ``owner`` itself.

    Every Disabler table shares it, so a method is installed once per owner
    however many tables disable it.
    """
    with _registries_lock:
        registries = vars(owner).get(REGISTRIES_ATTR)
        if registries is None:
            registries = {}
            setattr(owner, REGISTRIES_ATTR, registries)
        registry = registries.get(scope)
        if registry is None:
            registry = registries[scope] = OverrideRegistry(owner, scope)
    return registry
