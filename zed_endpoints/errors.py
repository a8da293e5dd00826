from __future__ import annotations

from typing import Any


class EndpointConfigurationError(RuntimeError):
    """Raised when endpoint groups cannot be wired at startup.

    These are programmer errors: the entry module could not be resolved, or a
    discovered group cannot be constructed without arguments.
    """

    def __init__(
        self,
        message: str,
        *,
        module: str | None = None,
        group: type[Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.module = module
        self.group = group
