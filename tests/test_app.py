"""Tests for minifetch display assembly."""

import pytest

from minifetch import app
from minifetch.app import (
    ASCII_ART,
    RESET,
    TEXT_COLOUR,
    USER_COLOUR,
    colourise,
    info_lines,
    main,
    pad_lines,
    render,
)
from minifetch.errors import HostIdentityError
from minifetch.models import HostIdentity, SystemInfo

FULL_INFO = SystemInfo(
    user="alice@box",
    os_name="Test Linux",
    kernel_release="6.1.0",
    uptime="45 Seconds",
    shell="bash",
    memory="1MiB / 2MiB ",
)


def test_colourise():
    """Test text is wrapped in a 256-colour sequence and reset."""
    assert colourise("hi", 219) == "\x1b[38;5;219mhi\x1b[0m"


def test_ascii_art_shape():
    """Test the logo has nine rows and ends with a reset."""
    assert len(ASCII_ART) == 9
    assert ASCII_ART[-1].endswith(RESET)
    assert not any(row.endswith(RESET) for row in ASCII_ART[:-1])


class TestInfoLines:
    """Tests for info_lines."""

    def test_order_and_colours(self):
        """Test the seven lines come out in display order."""
        lines = info_lines(FULL_INFO)

        assert lines == [
            colourise("alice@box", USER_COLOUR),
            "",
            colourise("OS: Test Linux", TEXT_COLOUR),
            colourise("KR: 6.1.0", TEXT_COLOUR),
            colourise("UP: 45 Seconds", TEXT_COLOUR),
            colourise("SH: bash", TEXT_COLOUR),
            colourise("ME: 1MiB / 2MiB ", TEXT_COLOUR),
        ]

    def test_missing_facts_are_none(self):
        """Test unreadable facts become None but the kernel line stays."""
        info = SystemInfo(
            user=None, os_name=None, kernel_release="6.1.0", uptime=None, shell=None, memory=None
        )
        lines = info_lines(info)

        assert len(lines) == 7
        assert lines[0] is None
        assert lines[1] == ""
        assert lines[3] == colourise("KR: 6.1.0", TEXT_COLOUR)
        assert lines[2] is None and lines[4] is None and lines[5] is None and lines[6] is None


class TestPadLines:
    """Tests for pad_lines."""

    def test_pads_to_height(self):
        """Test short input is padded with None."""
        assert pad_lines(["a", "b"], 4) == ["a", "b", None, None]

    def test_compacts_missing(self):
        """Test missing lines are removed before padding."""
        assert pad_lines(["a", None, "b"], 4) == ["a", "b", None, None]

    def test_truncates_excess(self):
        """Test lines beyond the height are dropped."""
        assert pad_lines(["a", "b", "c"], 2) == ["a", "b"]


class TestRender:
    """Tests for render."""

    def test_full_output(self):
        """Test every art row is printed with its info line."""
        rows = render(info_lines(FULL_INFO))

        assert len(rows) == 9
        assert rows[0] == f"{ASCII_ART[0]} {colourise('alice@box', USER_COLOUR)}"
        assert rows[1] == f"{ASCII_ART[1]} "
        assert rows[6] == f"{ASCII_ART[6]} {colourise('ME: 1MiB / 2MiB ', TEXT_COLOUR)}"
        assert rows[7] == ASCII_ART[7]
        assert rows[8] == ASCII_ART[8]

    def test_three_lines(self):
        """Test three present lines leave six art-only rows."""
        rows = render(["x", None, "y", None, "z"])

        assert len(rows) == 9
        assert rows[:3] == [f"{ASCII_ART[0]} x", f"{ASCII_ART[1]} y", f"{ASCII_ART[2]} z"]
        assert rows[3:] == list(ASCII_ART[3:])

    def test_custom_art(self):
        """Test render follows the height of the supplied art."""
        assert render(["info"], art=["#", "#"]) == ["# info", "#"]


class TestMain:
    """Tests for the main entry point."""

    def test_prints_nine_rows(self, capsys):
        """Test a normal run prints one line per art row."""
        assert main() == 0

        out = capsys.readouterr().out
        assert len(out.splitlines()) == 9

    def test_identity_failure_is_fatal(self, monkeypatch, capsys):
        """Test a uname failure prints nothing and returns 1."""

        def broken_identity():
            raise HostIdentityError("Failed to get UNAME.")

        monkeypatch.setattr(app, "read_host_identity", broken_identity)

        assert main() == 1
        assert capsys.readouterr().out == ""


@pytest.mark.parametrize("user", ["alice", "bob"])
def test_main_shows_user(monkeypatch, capsys, user):
    """Test the header carries the USER variable."""
    monkeypatch.setenv("USER", user)
    monkeypatch.setattr(
        app,
        "read_host_identity",
        lambda: HostIdentity(kernel_name="Linux", kernel_release="6.1.0", node_name="box"),
    )

    main()

    first = capsys.readouterr().out.splitlines()[0]
    assert f"{user}@box" in first
