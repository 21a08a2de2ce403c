"""minifetch - Display assembly and entry point."""

import logging
import sys
from collections.abc import Iterable, Sequence

from minifetch.collector import collect, read_host_identity
from minifetch.errors import HostIdentityError
from minifetch.models import SystemInfo

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# 256-colour palette indices
USER_COLOUR = 212
TEXT_COLOUR = 219
ART_GREEN = 112
ART_RED = 196

RESET = "\x1b[0m"


def fg(colour: int) -> str:
    """Get the SGR sequence selecting a 256-colour foreground."""
    return f"\x1b[38;5;{colour}m"


C1 = fg(ART_GREEN)
C2 = fg(ART_RED)

ASCII_ART: tuple[str, ...] = (
    f"{C1}   (    ((     ",
    f"{C1} ((  (((  ((   ",
    f"{C2} #%#{C1}({C2}###{C1}({C2}###   ",
    f"{C2}##{C1}(({C2}##{C1}({C2}##{C1}({C2}#%#  ",
    f"{C2}##%#####%####  ",
    f"{C2} #########%#   ",
    f"{C2}  ###%#####    ",
    f"{C2}    ###%#      ",
    f"{C2}      #        {RESET}",
)


def colourise(text: str, colour: int) -> str:
    """Wrap text in a foreground colour and reset afterwards."""
    return f"{fg(colour)}{text}{RESET}"


def _labelled(label: str, value: str | None) -> str | None:
    if value is None:
        return None
    return colourise(f"{label}: {value}", TEXT_COLOUR)


def info_lines(info: SystemInfo) -> list[str | None]:
    """Build the seven info lines in display order; ``None`` marks a missing fact."""
    return [
        colourise(info.user, USER_COLOUR) if info.user is not None else None,
        "",
        _labelled("OS", info.os_name),
        _labelled("KR", info.kernel_release),
        _labelled("UP", info.uptime),
        _labelled("SH", info.shell),
        _labelled("ME", info.memory),
    ]


def pad_lines(lines: Iterable[str | None], height: int) -> list[str | None]:
    """
    Compact present lines to the top and pad with ``None`` to ``height``.

    Lines that do not fit within ``height`` are dropped.
    """
    present = [line for line in lines if line is not None][:height]
    return present + [None] * (height - len(present))


def render(lines: Iterable[str | None], art: Sequence[str] = ASCII_ART) -> list[str]:
    """Pair each art row with its info line and return the output rows."""
    rows = []
    for art_row, line in zip(art, pad_lines(lines, len(art))):
        rows.append(f"{art_row} {line}" if line is not None else art_row)
    return rows


def main() -> int:
    """Entry point for minifetch."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)

    try:
        identity = read_host_identity()
    except HostIdentityError as exc:
        logger.error("%s", exc)
        return 1

    for row in render(info_lines(collect(identity))):
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())
