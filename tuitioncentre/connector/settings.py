"""Session settings: an ordered list of options with consistency context."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum, auto
from typing import Any


class SessionOption(Enum):
    """Session options whose handling the settings keep track of."""

    HOST = auto()
    PORT = auto()
    PRIORITY = auto()
    SOCKET = auto()
    SSL_MODE = auto()
    SSL_CA = auto()
    TLS_VERSIONS = auto()
    TLS_CIPHERSUITES = auto()
    COMPRESSION_ALGORITHMS = auto()
    CONNECTION_ATTRIBUTES = auto()


_LIST_OPTIONS = frozenset(
    {
        SessionOption.TLS_VERSIONS,
        SessionOption.TLS_CIPHERSUITES,
        SessionOption.COMPRESSION_ALGORITHMS,
    }
)


class Settings:
    """Stores session options in the order given; options may repeat."""

    def __init__(self) -> None:
        self._options: list[tuple[SessionOption, Any]] = []
        self.connection_attributes: dict[str, str] = {}
        self.host_count = 0
        self.user_priorities = False
        self.ssl_ca = False
        self.ssl_mode: Any = None
        self.tcpip = False
        self.socket = False
        self._list_set: set[SessionOption] = set()

    def add(self, option: SessionOption, value: Any) -> None:
        """Add an option; list options store each element as its own entry."""
        option = SessionOption(option)
        if option in _LIST_OPTIONS:
            self._list_set.add(option)
            items = [value] if isinstance(value, str) else list(value)
            self._options.extend((option, item) for item in items)
            return
        if option is SessionOption.CONNECTION_ATTRIBUTES:
            if isinstance(value, Mapping):
                self.connection_attributes.update(
                    (str(k), str(v)) for k, v in value.items()
                )
            self._options.append((option, value))
            return

        self._options.append((option, value))
        if option is SessionOption.HOST:
            self.host_count += 1
            self.tcpip = True
        elif option is SessionOption.PORT:
            self.tcpip = True
        elif option is SessionOption.SOCKET:
            self.socket = True
        elif option is SessionOption.PRIORITY:
            self.user_priorities = True
        elif option is SessionOption.SSL_CA:
            self.ssl_ca = True
        elif option is SessionOption.SSL_MODE:
            self.ssl_mode = value

    def has_option(self, option: SessionOption) -> bool:
        """Tell whether the option was set, even to an empty list."""
        option = SessionOption(option)
        if option in _LIST_OPTIONS and option in self._list_set:
            return True
        return any(opt is option for opt, _ in self._options)

    def get(self, option: SessionOption) -> Any:
        """Return the last value given for the option, or None."""
        option = SessionOption(option)
        for opt, value in reversed(self._options):
            if opt is option:
                return value
        return None

    def erase(self, option: SessionOption) -> None:
        """Remove every occurrence of the option and update the context."""
        option = SessionOption(option)
        self._options = [(opt, val) for opt, val in self._options if opt is not option]

        if option is SessionOption.HOST:
            self.host_count = 0
        if option in (SessionOption.HOST, SessionOption.PORT):
            if self.host_count == 0:
                self.tcpip = False
        elif option is SessionOption.SOCKET:
            self.socket = False
        elif option is SessionOption.PRIORITY:
            self.user_priorities = False
        elif option is SessionOption.SSL_CA:
            self.ssl_ca = False
        elif option is SessionOption.SSL_MODE:
            self.ssl_mode = None
        elif option is SessionOption.CONNECTION_ATTRIBUTES:
            self.connection_attributes.clear()

    def clear(self) -> None:
        """Remove all settings."""
        self.__init__()

    def __iter__(self) -> Iterator[tuple[SessionOption, Any]]:
        return iter(list(self._options))

    def update(self, pairs: Iterable[tuple[SessionOption, Any]]) -> None:
        """Add several options in order."""
        for option, value in pairs:
            self.add(option, value)