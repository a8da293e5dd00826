from __future__ import annotations

from typing import TypeVar

from .abstractions import EndpointGroup

_NO_GLOBAL_PREFIX_FLAG = "__zed_no_global_prefix__"

GroupT = TypeVar("GroupT", bound=type[EndpointGroup])


def no_global_prefix(cls: GroupT) -> GroupT:
    """Map the decorated group onto the application, ignoring the global prefix.

    The flag is stored on the decorated class only; subclasses do not inherit it.
    """
    if not (isinstance(cls, type) and issubclass(cls, EndpointGroup)):
        raise TypeError("no_global_prefix can only decorate EndpointGroup subclasses")
    setattr(cls, _NO_GLOBAL_PREFIX_FLAG, True)
    return cls


def has_no_global_prefix(cls: type) -> bool:
    return bool(vars(cls).get(_NO_GLOBAL_PREFIX_FLAG, False))
