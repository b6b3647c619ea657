"""Ordered callback lists used as feed extension points."""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

logger = logging.getLogger(__name__)

Hook = Callable[..., Any]


def _hook_name(hook: Hook) -> str:
    return getattr(hook, "__qualname__", None) or repr(hook)


class HookList:
    """An extension point: callbacks invoked in registration order.

    Each hook receives the mutable object being prepared and returns
    nothing; failures are signalled by raising. The first exception stops
    the remaining hooks and propagates to the caller unchanged.
    """

    def __init__(self, name: str, hooks: Iterable[Hook] = ()):
        self.name = name
        self._hooks: list[Hook] = []
        for hook in hooks:
            self.register(hook)

    def register(self, hook: Hook) -> Hook:
        """Append a hook. Returns it so this can be used as a decorator."""
        if not callable(hook):
            raise TypeError(f"{self.name} hook must be callable, got {hook!r}")
        self._hooks.append(hook)
        return hook

    def unregister(self, hook: Hook) -> None:
        """Remove the first registration of ``hook``.

        Raises:
            ValueError: If the hook is not registered
        """
        self._hooks.remove(hook)

    def clear(self) -> None:
        self._hooks.clear()

    def replace(self, hooks: Iterable[Hook]) -> None:
        """Swap the whole hook list for ``hooks``."""
        hooks = list(hooks)
        self.clear()
        for hook in hooks:
            self.register(hook)

    def __call__(self, *args: Any) -> None:
        for hook in list(self._hooks):
            logger.debug(f"Running {self.name} hook {_hook_name(hook)}")
            hook(*args)

    def __iter__(self) -> Iterator[Hook]:
        return iter(list(self._hooks))

    def __len__(self) -> int:
        return len(self._hooks)

    def __contains__(self, hook: object) -> bool:
        return hook in self._hooks

    def __repr__(self) -> str:
        names = ", ".join(_hook_name(h) for h in self._hooks)
        return f"HookList({self.name!r}, [{names}])"
