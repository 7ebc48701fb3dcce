import types

import pytest

from disabler.mytype import Scope
from disabler.naming import aliased_name, default_message, display_name, replacement_name, split_name


@pytest.mark.parametrize(
    "name, base, suffix",
    [
        ("fetch", "fetch", ""),
        ("ready?", "ready", "?"),
        ("save!", "save", "!"),
        ("value=", "value", "="),
        ("__call__", "__call__", ""),
    ],
)
def test_split_name(name, base, suffix):
    assert split_name(name) == (base, suffix)


def test_suffix_stays_at_the_end():
    assert aliased_name("ready?") == "ready_without_disable?"
    assert replacement_name("ready?") == "ready_with_disable?"
    assert aliased_name("save!") == "save_without_disable!"
    assert replacement_name("value=") == "value_with_disable="
    assert aliased_name("fetch") == "fetch_without_disable"


def test_display_name_drops_locals():
    class Local:
        class Inner:
            pass

    assert display_name(Local) == "Local"
    assert display_name(Local.Inner) == "Local.Inner"
    assert display_name(Local, Scope.CLASS) == "type[Local]"


def test_display_name_of_module():
    module = types.ModuleType("fake_network")
    assert display_name(module) == "fake_network"
    assert default_message(module, "connect", Scope.MODULE) == "fake_network#connect is disabled"


def test_default_message():
    class TheClass:
        pass

    assert default_message(TheClass, "the_method") == "TheClass#the_method is disabled"
    assert default_message(TheClass, "build", Scope.CLASS) == "type[TheClass]#build is disabled"
