# Copyright (c) 2025, synclist contributors
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "SyncListError",
    "ConfigurationError",
    "CapabilityConflictError",
)


class SyncListError(Exception):
    default_message: ClassVar[str] = "synclist error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class ConfigurationError(SyncListError):
    """Raised when a backend operation is used but was never configured."""

    default_message = "Event backend is not configured"
    __slots__ = ()

    @classmethod
    def missing_operation(cls, operation: str, target: Any = None):
        details = {"operation": operation}
        if target is not None:
            details["target"] = type(target).__name__
        return cls(
            f"You need to configure a '{operation}' operation for the event backend",
            details=details,
        )


class CapabilityConflictError(SyncListError):
    """Raised when a capability would overwrite an existing member."""

    default_message = "Capability conflicts with an existing member"
    __slots__ = ()

    @classmethod
    def for_member(cls, member: str, capability: type, base: type):
        return cls(
            f"There is already a '{member}' member defined on {base.__name__}",
            details={
                "member": member,
                "capability": capability.__name__,
                "base": base.__name__,
            },
        )
