from enum import Enum


class NamedEnum(Enum):
    def __str__(self):
        """Show the member's name"""
        return self.name


class Scope(NamedEnum):
    """Where an intercepted method lives."""
    INSTANCE = "instance"
    CLASS = "class"
    MODULE = "module"
