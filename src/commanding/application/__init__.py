"""
Application Layer
Command contracts and the aggregate command
"""
from commanding.application.aggregate_command import AbstractAggregateCommand, guess_event_name
from commanding.application.command import AbstractCommand, CommandInterface

__all__ = [
    "CommandInterface",
    "AbstractCommand",
    "AbstractAggregateCommand",
    "guess_event_name",
]
