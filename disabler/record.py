import inspect
from functools import wraps

from .errors import MethodDisabledError
from .logger import get_logger
from .mytype import Scope
from .naming import aliased_name, default_message, display_name, replacement_name
from .typing import (
    is_class_method,
    is_method_descriptor,
    is_regular_function,
    is_static_method,
    underlying_function,
)

logger = get_logger()

RECORD_ATTR = "__disabler_record__"


class OverrideRecord:
    """Interception of a single method.

    Creating a record rewrites the owner once: the current implementation is
    kept under ``original_name``, a replacement is installed under
    ``replacement_name`` and the public name is pointed at the replacement.
    The record starts disabled. After that, ``disable`` and ``restore`` only
    flip a flag that the replacement checks on every call.

    For class-level methods pass ``scope=Scope.CLASS``; the class object
    itself then owns its ``classmethod``/``staticmethod`` attributes. For a
    module-level function pass the module with ``scope=Scope.MODULE``.

    Records are normally created through ``OverrideRegistry.disable``, which
    reuses the record of a method that is already intercepted. Building a
    second record for the same owner and name raises ``ValueError``.
    """

    def __init__(self, owner, method_name: str, message: str = None, scope: Scope = Scope.INSTANCE):
        self.owner = owner
        self.method_name = method_name
        self.scope = scope
        self.default_message = default_message(owner, method_name, scope)
        self.message = self.default_message
        self.original_name = aliased_name(method_name)
        self.replacement_name = replacement_name(method_name)
        self.enabled = True

        self.original = self._resolve()
        self._install()
        self.disable(message)

    def disable(self, message: str = None):
        self.message = message if message is not None else self.default_message
        self.enabled = False
        logger.debug(f"Disabled {self._label}")

    def restore(self):
        self.enabled = True
        logger.debug(f"Restored {self._label}")

    @property
    def disabled(self) -> bool:
        return not self.enabled

    def execute(self, receiver, *args, **kwargs):
        """Body of the replacement: raise if disabled, otherwise run the original.

        ``receiver`` is the instance for instance methods, the class for
        class-level methods and ``None`` for module functions.
        """
        if self.disabled:
            logger.info(f"Blocked call to {self._label}")
            raise MethodDisabledError(self.message, self.owner, self.method_name)
        return self._bind(receiver)(*args, **kwargs)

    def _bind(self, receiver):
        if self.scope is Scope.INSTANCE:
            return self.original.__get__(receiver, type(receiver))
        if self.scope is Scope.CLASS:
            return self.original.__get__(None, receiver)
        return self.original

    def _resolve(self):
        try:
            original = inspect.getattr_static(self.owner, self.method_name)
        except AttributeError:
            raise AttributeError(
                f"{display_name(self.owner)} has no attribute {self.method_name!r}"
            ) from None

        existing = intercepting_record(original)
        if existing is not None and existing.owner is self.owner and existing.scope is self.scope:
            raise ValueError(f"{self._label} is already intercepted by {existing!r}")

        if self.scope is Scope.INSTANCE:
            if is_class_method(original) or is_static_method(original):
                raise TypeError(f"{self._label} is a class-level method, use disable_class_method")
            if not is_method_descriptor(original):
                raise TypeError(f"{self._label} is not a method")
        elif self.scope is Scope.CLASS:
            if not (is_class_method(original) or is_static_method(original)):
                raise TypeError(f"{self._label} is not a classmethod or staticmethod")
        elif not is_regular_function(original):
            raise TypeError(f"{self._label} is not a function")
        return original

    def _install(self):
        replacement = self._make_replacement()
        setattr(self.owner, self.replacement_name, replacement)
        setattr(self.owner, self.original_name, self.original)
        setattr(self.owner, self.method_name, replacement)
        logger.debug(f"Installed interception for {self._label} (original kept as {self.original_name!r})")

    def _make_replacement(self):
        record = self
        func = underlying_function(self.original)
        is_async = inspect.iscoroutinefunction(func)

        if self.scope is Scope.INSTANCE or is_class_method(self.original):
            # receiver is the instance, or the class for classmethods
            if is_async:
                async def wrapper(receiver, *args, **kwargs):
                    return await record.execute(receiver, *args, **kwargs)
            else:
                def wrapper(receiver, *args, **kwargs):
                    return record.execute(receiver, *args, **kwargs)
        else:
            owner = self.owner if self.scope is Scope.CLASS else None
            if is_async:
                async def wrapper(*args, **kwargs):
                    return await record.execute(owner, *args, **kwargs)
            else:
                def wrapper(*args, **kwargs):
                    return record.execute(owner, *args, **kwargs)

        wrapper = wraps(func)(wrapper)
        # after wraps, which copies the __dict__ of an inherited replacement
        setattr(wrapper, RECORD_ATTR, record)

        if is_class_method(self.original):
            return classmethod(wrapper)
        if is_static_method(self.original):
            return staticmethod(wrapper)
        return wrapper

    @property
    def _label(self):
        return f"{display_name(self.owner, self.scope)}#{self.method_name}"

    def __repr__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"OverrideRecord<{self._label} {state}>"


def intercepting_record(obj):
    """The OverrideRecord whose replacement ``obj`` is, if any."""
    return getattr(underlying_function(obj), RECORD_ATTR, None)
