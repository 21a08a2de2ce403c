"""System fact collection for minifetch."""

import logging
import os
from collections.abc import Callable, Mapping
from typing import TypeVar

from minifetch import parsers
from minifetch.errors import EnvVarError, FetchError, HostIdentityError, ResourceReadError
from minifetch.models import HostIdentity, SystemInfo

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"
MEMINFO_PATH = "/proc/meminfo"
UPTIME_PATH = "/proc/uptime"

USER_ENV = "USER"
SHELL_ENV = "SHELL"

T = TypeVar("T")


def read_host_identity() -> HostIdentity:
    """
    Query uname for the kernel and node names.

    Raises:
        HostIdentityError: If uname is unavailable on this platform or fails.
    """
    try:
        uname = os.uname()
    except (AttributeError, OSError) as exc:
        raise HostIdentityError("Failed to get UNAME.") from exc

    return HostIdentity(
        kernel_name=uname.sysname,
        kernel_release=uname.release,
        node_name=uname.nodename,
    )


def read_resource(path: str) -> str:
    """Read a text resource, wrapping I/O failures in ResourceReadError."""
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceReadError(f"Cannot read {path}: {exc}") from exc


def read_env(environ: Mapping[str, str], name: str) -> str:
    """Look up an environment variable, raising EnvVarError if unset."""
    try:
        return environ[name]
    except KeyError as exc:
        raise EnvVarError(f"{name} is not set") from exc


def get_os_name(path: str = OS_RELEASE_PATH) -> str:
    """Get the OS pretty name from an os-release file."""
    return parsers.parse_os_release(read_resource(path))


def get_memory_usage(path: str = MEMINFO_PATH) -> str:
    """Get memory usage formatted as used/total MiB."""
    return parsers.parse_meminfo(read_resource(path)).format()


def get_uptime(path: str = UPTIME_PATH) -> str:
    """Get uptime as a human duration."""
    return parsers.parse_uptime(read_resource(path))


def get_shell(environ: Mapping[str, str] = os.environ) -> str:
    """Get the login shell's executable name."""
    return parsers.shell_name(read_env(environ, SHELL_ENV))


def get_user_line(identity: HostIdentity, environ: Mapping[str, str] = os.environ) -> str:
    """Get the ``user@host`` header."""
    return parsers.user_line(read_env(environ, USER_ENV), identity.node_name)


def _optional(name: str, gather: Callable[[], T]) -> T | None:
    """Run one gatherer, degrading any FetchError to an absent value."""
    try:
        return gather()
    except FetchError as exc:
        logger.debug("Skipping %s: %s", name, exc)
        return None


def collect(
    identity: HostIdentity,
    environ: Mapping[str, str] = os.environ,
    os_release_path: str = OS_RELEASE_PATH,
    meminfo_path: str = MEMINFO_PATH,
    uptime_path: str = UPTIME_PATH,
) -> SystemInfo:
    """
    Gather every displayed fact.

    Each fact is read independently; a failure only blanks that fact.

    Args:
        identity: Host identity from read_host_identity().
        environ: Environment to read USER and SHELL from.
        os_release_path: Path to the os-release file.
        meminfo_path: Path to the meminfo file.
        uptime_path: Path to the uptime file.
    """
    return SystemInfo(
        user=_optional("user", lambda: get_user_line(identity, environ)),
        os_name=_optional("os name", lambda: get_os_name(os_release_path)),
        kernel_release=identity.kernel_release,
        uptime=_optional("uptime", lambda: get_uptime(uptime_path)),
        shell=_optional("shell", lambda: get_shell(environ)),
        memory=_optional("memory", lambda: get_memory_usage(meminfo_path)),
    )
