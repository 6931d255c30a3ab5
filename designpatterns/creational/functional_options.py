"""Two ways of configuring a server: option functions and an options object."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

NANOSECOND = 1
SECOND = 1_000_000_000 * NANOSECOND


@dataclass
class ServerConfig:
    """Server settings; ``timeout`` is a duration in nanoseconds."""

    port: int = 8080
    timeout: int = 60
    enable_logs: bool = False


ServerOption = Callable[[ServerConfig], None]


def with_port(port: int) -> ServerOption:
    """Option that sets the port."""

    def apply(config: ServerConfig) -> None:
        config.port = port

    return apply


def with_timeout(timeout: int) -> ServerOption:
    """Option that sets the timeout, in nanoseconds."""

    def apply(config: ServerConfig) -> None:
        config.timeout = timeout

    return apply


def with_logs(enabled: bool) -> ServerOption:
    """Option that turns logging on or off."""

    def apply(config: ServerConfig) -> None:
        config.enable_logs = enabled

    return apply


def new_server(*options: ServerOption) -> ServerConfig:
    """Build a config from the defaults, applying ``options`` in order."""
    config = ServerConfig()
    for option in options:
        option(config)
    return config


@dataclass
class ServerOptions:
    """Mutable server options; ``timeout`` is a duration in nanoseconds."""

    port: int = 8080
    timeout: int = 60 * SECOND
    enable_logs: bool = False


@dataclass
class Server:
    """A server holding its options."""

    options: ServerOptions


def new_server_options() -> ServerOptions:
    """Return options with the default values."""
    return ServerOptions()


def new_server_two(options: ServerOptions) -> Server:
    """Create a server with the given options."""
    return Server(options)