import random

import pytest

from supportconfig.errors import InvalidEntryError, SkipSection, UnsafePathError
from supportconfig.splitter import (
    clean_path,
    confine_path,
    header_to_path,
    require_clean_path,
    strip_note,
)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("# /etc/os-release", "/etc/os-release"),
        ("# /var/log/nodes/logname.log - Last 10000 Lines", "/var/log/nodes/logname.log"),
        ("# /var/log/a - b.log - Last 5 Lines", "/var/log/a - b.log"),
        ("# /var/log/a - b.log", "/var/log/a - b.log"),
        ("# /etc/fstab Lines", "/etc/fstab Lines"),
    ],
)
def test_header_to_path(header: str, expected: str) -> None:
    assert header_to_path(header) == expected


def test_header_without_prefix_is_invalid() -> None:
    with pytest.raises(InvalidEntryError):
        header_to_path("/etc/os-release")
    with pytest.raises(InvalidEntryError):
        header_to_path("#/etc/os-release")


def test_missing_file_is_skipped() -> None:
    with pytest.raises(SkipSection):
        header_to_path("# /etc/SuSE-brand - File not found")


def test_strip_note_needs_separator_after_start() -> None:
    assert strip_note(" - 10 Lines") == " - 10 Lines"
    assert strip_note("/a - Last 10 Lines") == "/a"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/etc/os-release", "/etc/os-release"),
        ("/var/../../../../../.vimrc", "/.vimrc"),
        ("../../etc/passwd", "etc/passwd"),
        ("//etc//./hosts", "/etc/hosts"),
        ("/etc/sysconfig/..", "/etc"),
        ("/", ""),
        ("", ""),
        ("../..", ""),
        ("./a/./b/", "a/b"),
        ("/a/..b/c", "/a/..b/c"),
    ],
)
def test_clean_path(raw: str, expected: str) -> None:
    assert clean_path(raw) == expected


def test_clean_path_never_climbs() -> None:
    rng = random.Random(1337)
    alphabet = ["/", "..", ".", "etc", "a b", "...", "..x", "//"]
    for _ in range(2000):
        raw = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))
        cleaned = clean_path(raw)
        parts = cleaned.split("/")
        assert ".." not in parts
        assert "." not in parts
        assert "//" not in cleaned
        assert clean_path(cleaned) == cleaned


def test_confine_path_stays_below_base(tmp_path) -> None:
    assert confine_path(tmp_path, "/.vimrc") == tmp_path / ".vimrc"
    assert confine_path(tmp_path, "/etc/os-release") == tmp_path / "etc" / "os-release"
    assert confine_path(tmp_path, "/../../x") == tmp_path / "x"


def test_confine_path_rejects_empty(tmp_path) -> None:
    with pytest.raises(InvalidEntryError):
        confine_path(tmp_path, "/..")


def test_confine_path_rejects_symlink_escape(tmp_path) -> None:
    base = tmp_path / "out"
    outside = tmp_path / "outside"
    base.mkdir()
    outside.mkdir()
    (base / "etc").symlink_to(outside, target_is_directory=True)

    with pytest.raises(UnsafePathError):
        confine_path(base, "/etc/passwd")


def test_require_clean_path_rejects_nul() -> None:
    with pytest.raises(InvalidEntryError):
        require_clean_path("/var/log/a\x00b")
