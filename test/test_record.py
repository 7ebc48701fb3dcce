import pytest

from disabler import MethodDisabledError, OverrideRecord, OverrideRegistry, Scope, UnknownOverrideError
from disabler.record import intercepting_record


@pytest.fixture
def counter_class():
    class Counter:
        def __init__(self):
            self.count = 0

        def increment(self, by=1):
            self.count += by
            return self.count

    return Counter


def test_record_starts_disabled(counter_class):
    record = OverrideRecord(counter_class, "increment")
    assert record.disabled
    assert not record.enabled
    assert record.message == "Counter#increment is disabled"
    assert record.original_name == "increment_without_disable"
    assert record.replacement_name == "increment_with_disable"
    assert repr(record) == "OverrideRecord<Counter#increment disabled>"


def test_record_blocks_side_effects(counter_class):
    OverrideRecord(counter_class, "increment")
    counter = counter_class()
    with pytest.raises(MethodDisabledError):
        counter.increment(5)
    assert counter.count == 0


def test_record_flag_toggles_dispatch(counter_class):
    record = OverrideRecord(counter_class, "increment", "stop counting")
    counter = counter_class()

    record.restore()
    assert counter.increment(by=2) == 2

    record.disable()
    with pytest.raises(MethodDisabledError, match="Counter#increment is disabled"):
        counter.increment()

    record.disable("stop counting")
    with pytest.raises(MethodDisabledError, match="stop counting"):
        counter.increment()
    assert counter.count == 2


def test_record_execute_forwards(counter_class):
    record = OverrideRecord(counter_class, "increment")
    record.restore()
    counter = counter_class()
    assert record.execute(counter, 3) == 3


def test_registry_reuses_record(counter_class):
    registry = OverrideRegistry(counter_class)
    first = registry.disable("increment")
    second = registry.disable("increment", "again")
    assert first is second
    assert second.message == "again"
    assert list(registry) == [first]
    assert "increment" in registry
    assert registry.is_disabled("increment")

    registry.restore("increment")
    assert not registry.is_disabled("increment")
    assert counter_class().increment() == 1


def test_registry_restore_unknown(counter_class):
    registry = OverrideRegistry(counter_class, Scope.INSTANCE)
    with pytest.raises(UnknownOverrideError, match="'increment' was never disabled"):
        registry.restore("increment")
    assert not registry.is_disabled("increment")
    assert len(registry) == 0


def test_second_record_for_same_method_is_refused(counter_class):
    original = counter_class.__dict__["increment"]
    record = OverrideRecord(counter_class, "increment")

    with pytest.raises(ValueError, match="already intercepted"):
        OverrideRecord(counter_class, "increment")
    assert counter_class.__dict__["increment_without_disable"] is original

    registry = OverrideRegistry(counter_class)
    assert registry.disable("increment", "adopted") is record
    assert record.message == "adopted"
    registry.restore("increment")
    assert counter_class().increment() == 1


def test_replacement_points_back_to_record(counter_class):
    record = OverrideRecord(counter_class, "increment")
    assert intercepting_record(counter_class.__dict__["increment"]) is record
    assert intercepting_record(counter_class.__dict__["increment_without_disable"]) is None
