"""Data models for minifetch."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class HostIdentity:
    """Immutable kernel and host names reported by uname."""

    kernel_name: str
    kernel_release: str
    node_name: str


@dataclass(slots=True, frozen=True)
class MemoryStats:
    """Immutable memory totals read from meminfo."""

    total_kib: int
    available_kib: int

    @property
    def used_kib(self) -> int:
        """Get memory in use (KiB)."""
        return self.total_kib - self.available_kib

    def format(self) -> str:
        """Format as used/total MiB, e.g. ``"5859MiB / 7812MiB "``."""
        return f"{self.used_kib // 1024}MiB / {self.total_kib // 1024}MiB "


@dataclass(slots=True, frozen=True)
class SystemInfo:
    """Gathered facts for one run; ``None`` marks a fact that could not be read."""

    user: str | None
    os_name: str | None
    kernel_release: str
    uptime: str | None
    shell: str | None
    memory: str | None
