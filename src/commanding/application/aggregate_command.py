"""
Aggregate Command
A command that runs child commands inside a named event
"""
from __future__ import annotations

import re
from typing import Any

from commanding.application.command import AbstractCommand, CommandInterface
from commanding.config import get_settings
from commanding.domain.command_event import CommandEvent
from commanding.exceptions import InvalidCommandError
from commanding.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

# ASCII only; non-ASCII capitals are left untouched
_UPPERCASE = re.compile(r"[A-Z]")


def guess_event_name(command: CommandInterface | type, separator: str = "-") -> str:
    """
    Derive an event name from a command's class name.

    Module and enclosing-class qualifiers are dropped, then every uppercase
    letter becomes ``separator`` followed by the lowercase letter. The result
    keeps its leading separator.

    Args:
        command: Command instance or class
        separator: Inserted before each former capital

    Returns:
        e.g. ``"-send-email-command"`` for ``SendEmailCommand``; ``""`` when
        the class name has no uppercase letter

    Example:
        >>> guess_event_name(SendEmailCommand(), "_")
        '_send_email_command'
    """
    cls = command if isinstance(command, type) else type(command)
    base_name = cls.__qualname__.rsplit(".", 1)[-1]

    if not _UPPERCASE.search(base_name):
        return ""
    return _UPPERCASE.sub(lambda match: separator + match.group(0).lower(), base_name)


class AbstractAggregateCommand(AbstractCommand):
    """
    Base class for commands that delegate part of their work to children.

    Each delegation is published on this command's event manager, so
    listeners attached under the child's event name (e.g. auditing, or
    stopping propagation to veto the child) see the CommandEvent before and
    after the child runs, depending on their priority.

    Example:
        class SignupCommand(AbstractAggregateCommand):
            def execute(self):
                user = self.execute_child(CreateUserCommand(self.email))
                self.execute_child(SendEmailCommand(user.email), "welcome-mail")
                return user
    """

    guess_event_name = staticmethod(guess_event_name)

    def execute_child(
        self,
        command: CommandInterface,
        name: str | None = None,
        once: bool = False,
    ) -> Any:
        """
        Execute a child command by triggering a CommandEvent for it.

        A listener that runs ``event.target.execute()`` and stores the value on
        ``event.result`` is attached under ``name`` and the event is
        triggered. Without ``once`` the listener stays attached, so a later
        delegation under the same name runs it again along with its own.

        Args:
            command: Child command
            name: Event name; derived from the child's class when omitted
            once: Attach the executing listener as a one-shot subscription

        Returns:
            ``event.result`` after all listeners ran

        Raises:
            InvalidCommandError: If ``command`` is not a command
            Exception: Whatever the child's ``execute()`` raises, unchanged
        """
        if not isinstance(command, CommandInterface):
            raise InvalidCommandError(
                f"{type(command).__name__} is not a command",
                details={"received": type(command).__name__},
            )

        name = name or self.guess_event_name(command, get_settings().event_name_separator)
        command_name = command.__class__.__name__
        event = CommandEvent(name, command)
        event_manager = self.get_event_manager()

        def execute_target(command_event: CommandEvent) -> None:
            command_event.set_result(command_event.target.execute())

        if once:
            listener = event_manager.once(name, execute_target)
        else:
            listener = event_manager.attach(name, execute_target)

        logger.info(
            f"Executing child command: {command_name}",
            extra={"event_name": name, "command": command_name, "aggregate": self.__class__.__name__},
        )

        try:
            event_manager.trigger(event)
        except Exception as e:
            logger.error(
                f"Child command failed: {command_name}",
                extra={"event_name": name, "command": command_name, "error": str(e)},
            )
            raise
        finally:
            if once:
                # still attached if propagation stopped before it ran
                event_manager.detach(listener, name)

        if not event.has_result:
            logger.warning(
                f"Child command skipped: {command_name}",
                extra={"event_name": name, "command": command_name, "propagation_stopped": event.propagation_is_stopped},
            )
        else:
            logger.info(
                f"Child command executed successfully: {command_name}",
                extra={"event_name": name, "command": command_name},
            )
        return event.get_result()
