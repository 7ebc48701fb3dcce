class DisablerError(Exception):
    """Base class for errors raised by disabler."""


class MethodDisabledError(DisablerError, RuntimeError):
    """Raised when a disabled method is called."""

    def __init__(self, message, owner=None, method_name=None):
        super().__init__(message)
        self.message = message
        self.owner = owner
        self.method_name = method_name


class UnknownOverrideError(DisablerError, LookupError):
    """Raised when restoring a method that was never disabled."""

    def __init__(self, owner, method_name):
        super().__init__(f"{method_name!r} was never disabled on {owner!r}")
        self.owner = owner
        self.method_name = method_name
