from typing import Any, Dict, Optional


# ───────────────────────── Base ─────────────────────────
class CommandingError(Exception):
    """Base class for errors raised by the command/event/hydration layers.

    Failures raised by a command's own ``execute()`` are never wrapped in these;
    they propagate to the caller untouched.
    """
    code: str = "commanding_error"
    message: str
    details: Optional[Dict[str, Any]]

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        self.message = message or self.__class__.__name__
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


# ───────────────────────── Specific errors ─────────────────────────
class InvalidCommandError(CommandingError, TypeError):
    code = "invalid_command"


class InvalidListenerError(CommandingError, TypeError):
    code = "invalid_listener"


class HydrationError(CommandingError):
    code = "hydration_error"


__all__ = [
    "CommandingError",
    "InvalidCommandError",
    "InvalidListenerError",
    "HydrationError",
]
