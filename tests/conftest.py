from dataclasses import dataclass

import pytest

from commanding.application import AbstractAggregateCommand, AbstractCommand
from commanding.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for key in ("COMMANDING_ENV", "COMMANDING_LOG_LEVEL", "COMMANDING_JSON_LOGS", "COMMANDING_EVENT_SEPARATOR"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class CountingCommand(AbstractCommand):
    def __init__(self, value="done"):
        self.value = value
        self.calls = 0

    def get_value(self):
        return self.value

    def set_value(self, value):
        self.value = value

    def is_pending(self):
        return self.calls == 0

    def execute(self):
        self.calls += 1
        return self.value


class FailingCommand(AbstractCommand):
    def __init__(self, error):
        self.error = error

    def execute(self):
        raise self.error


class SendEmailCommand(CountingCommand):
    pass


@dataclass
class ArchiveCommand(AbstractCommand):
    folder: str = "inbox"

    def execute(self):
        return f"archived {self.folder}"


class SignupCommand(AbstractAggregateCommand):
    def __init__(self, child=None):
        self.child = child

    def execute(self):
        return self.execute_child(self.child)


@pytest.fixture
def counting_command():
    return CountingCommand()


@pytest.fixture
def aggregate():
    return SignupCommand()
