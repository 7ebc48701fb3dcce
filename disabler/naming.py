"""Name mangling for intercepted methods.

A method ``ready?`` is kept as ``ready_without_disable?`` and replaced by
``ready_with_disable?``: trailing markers stay at the end of the name.
"""
from typing import NamedTuple

from .mytype import Scope
from .typing import is_module

SUFFIXES = "!?="
ALIAS_INFIX = "_without_disable"
REPLACEMENT_INFIX = "_with_disable"


class NameParts(NamedTuple):
    base: str
    suffix: str


def split_name(method_name: str) -> NameParts:
    if method_name and method_name[-1] in SUFFIXES:
        return NameParts(method_name[:-1], method_name[-1])
    return NameParts(method_name, "")


def aliased_name(method_name: str) -> str:
    """Name the original implementation is kept under."""
    base, suffix = split_name(method_name)
    return f"{base}{ALIAS_INFIX}{suffix}"


def replacement_name(method_name: str) -> str:
    base, suffix = split_name(method_name)
    return f"{base}{REPLACEMENT_INFIX}{suffix}"


def display_name(owner, scope: Scope = Scope.INSTANCE) -> str:
    """Human readable form of an owner, used in default error messages."""
    if is_module(owner):
        return owner.__name__
    qualname = getattr(owner, "__qualname__", None) or repr(owner)
    qualname = qualname.rpartition("<locals>.")[2]
    if scope is Scope.CLASS:
        return f"type[{qualname}]"
    return qualname


def default_message(owner, method_name: str, scope: Scope = Scope.INSTANCE) -> str:
    return f"{display_name(owner, scope)}#{method_name} is disabled"
