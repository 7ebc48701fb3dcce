from .disabler import getDisabler


class MethodDisabling:
    """Mixin giving a class macros to disable and restore its own methods.

    Example::

        class Client(MethodDisabling):
            def fetch(self, url):
                ...

            @classmethod
            def connect(cls):
                ...

        Client.disable_method("fetch")
        Client().fetch("x")                  # MethodDisabledError: Client#fetch is disabled
        Client.restore_method("fetch")

        Client.disable_class_method("connect")
        Client.connect()                     # MethodDisabledError: type[Client]#connect is disabled
        Client.restore_class_method("connect")
    """

    @classmethod
    def disable_method(cls, method_name: str, message: str = None):
        return getDisabler().disable_method(cls, method_name, message)

    @classmethod
    def restore_method(cls, method_name: str):
        return getDisabler().restore_method(cls, method_name)

    @classmethod
    def disable_class_method(cls, method_name: str, message: str = None):
        return getDisabler().disable_class_method(cls, method_name, message)

    @classmethod
    def restore_class_method(cls, method_name: str):
        return getDisabler().restore_class_method(cls, method_name)
