import functools
import types


def is_class_method(obj):
    return isinstance(obj, classmethod)

def is_static_method(obj):
    return isinstance(obj, staticmethod)

def is_regular_function(obj):
    return isinstance(obj, (types.FunctionType, types.BuiltinFunctionType))

def is_module(obj):
    return isinstance(obj, types.ModuleType)

def is_method_descriptor(obj):
    """Anything that binds like a method: has __get__ but is not a data descriptor."""
    kind = type(obj)
    return (
        hasattr(kind, "__get__")
        and not hasattr(kind, "__set__")
        and not hasattr(kind, "__delete__")
        and not is_class_method(obj)
        and not is_static_method(obj)
    )

def underlying_function(obj):
    """Unwrap classmethod/staticmethod/partialmethod objects to the function they hold."""
    if is_class_method(obj) or is_static_method(obj):
        return obj.__func__
    if isinstance(obj, functools.partialmethod):
        return obj.func
    return obj
