import pytest

from commanding.application import AbstractCommand, CommandInterface
from commanding.domain import CommandEvent
from commanding.infrastructure.hydration import ClassMethodsHydrator, DataclassHydrator
from commanding.infrastructure.messaging import EventManager
from conftest import ArchiveCommand, CountingCommand, SignupCommand


def test_abstract_command_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractCommand()


def test_commands_satisfy_the_protocol(counting_command):
    assert isinstance(counting_command, CommandInterface)
    assert isinstance(ArchiveCommand(), CommandInterface)
    assert not isinstance(object(), CommandInterface)


def test_hydrator_is_built_lazily_and_cached(counting_command):
    hydrator = counting_command.get_hydrator()

    assert isinstance(hydrator, ClassMethodsHydrator)
    assert counting_command.get_hydrator() is hydrator
    assert CountingCommand().get_hydrator() is not hydrator


def test_extract_skips_infrastructure_accessors(counting_command):
    counting_command.get_event_manager()
    data = counting_command.get_hydrator().extract(counting_command)

    assert data == {"value": "done", "is_pending": True}
    for key in ("hydrator", "event_manager", "get_hydrator", "get_event_manager"):
        assert key not in data


def test_aggregate_extract_skips_infrastructure_accessors():
    aggregate = SignupCommand()
    assert aggregate.get_hydrator().extract(aggregate) == {}


def test_hydrate_through_mutators(counting_command):
    counting_command.get_hydrator().hydrate({"value": "changed", "unknown": 1}, counting_command)
    assert counting_command.execute() == "changed"


def test_set_hydrator_bypasses_construction(counting_command):
    hydrator = DataclassHydrator()
    counting_command.set_hydrator(hydrator)
    assert counting_command.get_hydrator() is hydrator


def test_dataclass_command_with_declarative_hydrator():
    command = ArchiveCommand(folder="spam").set_hydrator(DataclassHydrator())
    hydrator = command.get_hydrator()

    assert hydrator.extract(command) == {"folder": "spam"}
    hydrator.hydrate({"folder": "sent"}, command)
    assert command.execute() == "archived sent"


def test_event_manager_is_lazy_and_identified(counting_command):
    event_manager = counting_command.get_event_manager()

    assert counting_command.get_event_manager() is event_manager
    assert "CountingCommand" in event_manager.identifiers
    assert f"{CountingCommand.__module__}.CountingCommand" in event_manager.identifiers


def test_set_event_manager_overrides_default(counting_command):
    shared = EventManager(identifiers=["app"])
    counting_command.set_event_manager(shared)

    assert counting_command.get_event_manager() is shared
    assert shared.identifiers[0] == "app"
    assert "CountingCommand" in shared.identifiers


def test_command_event_tracks_whether_a_result_was_stored(counting_command):
    event = CommandEvent("evt", counting_command)
    assert event.result is None
    assert not event.has_result

    event.result = None
    assert event.has_result
    assert event.set_result("done").get_result() == "done"
