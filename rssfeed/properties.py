"""Whitelist-validated store for channel-level feed metadata."""

from collections.abc import Iterable, Iterator, MutableMapping
from typing import Any

from rssfeed.dates import normalize_date
from rssfeed.elements import CHANNEL_ELEMENTS, DATE_CHANNEL_ELEMENTS
from rssfeed.errors import UnknownElementError


class PropertyStore(MutableMapping):
    """Channel properties keyed by whitelisted element names.

    Every write goes through :meth:`set`, so item assignment from a
    prepare-properties hook is validated and date-normalized exactly like a
    direct call. Reads of unknown names fail instead of returning nothing.
    """

    def __init__(self, elements: Iterable[str] = CHANNEL_ELEMENTS):
        self.elements = tuple(dict.fromkeys(elements))
        self._values: dict[str, str] = {}

    def _check(self, name: str) -> None:
        if name not in self.elements:
            raise UnknownElementError(name)

    def set(self, name: str, value: Any) -> None:
        """Set a channel property, replacing any previous value.

        ``pubDate`` and ``lastBuildDate`` are converted to RFC-822; other
        values are stored as strings. ``None`` unsets the property.

        Raises:
            UnknownElementError: If ``name`` is not an allowed element
            InvalidDateError: If a date property cannot be parsed
        """
        self._check(name)
        if value is None:
            self._values.pop(name, None)
            return
        if name in DATE_CHANNEL_ELEMENTS:
            value = normalize_date(value)
        self._values[name] = str(value)

    def get(self, name: str, default: Any = None) -> Any:
        """Return the stored value, or ``default`` if it was never set.

        Raises:
            UnknownElementError: If ``name`` is not an allowed element
        """
        self._check(name)
        return self._values.get(name, default)

    def all(self) -> "PropertyStore":
        """Return the live mapping, for hooks that mutate properties in place."""
        return self

    def as_dict(self) -> dict[str, str]:
        """Snapshot of the set properties in whitelist order."""
        return {name: self._values[name] for name in self.elements if name in self._values}

    def __getitem__(self, name: str) -> str:
        self._check(name)
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self._check(name)
        del self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PropertyStore({self.as_dict()!r})"
