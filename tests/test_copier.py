"""Tests for copy_family: pure filesystem logic."""

from __future__ import annotations

from pathlib import Path

import pytest

from ts_stager.exceptions import ContractViolation, IncompleteFamilyError
from ts_stager.staging.copier import copy_family


@pytest.fixture
def dirs(tmp_path: Path) -> tuple[Path, Path]:
    src = tmp_path / "src"
    dest = tmp_path / "lib"
    src.mkdir()
    dest.mkdir()
    return src, dest


class TestCopyFamily:
    def test_renames_extension(self, dirs):
        src, dest = dirs
        payload = b"export const foo = 1;\r\n\xe2\x9c\x93\n"
        (src / "foo.ts").write_bytes(payload)

        result = copy_family(src, "foo", dest, ".ts", ".ts.source")

        assert result == dest / "foo.ts.source"
        assert result.read_bytes() == payload
        assert not (dest / "foo.ts").exists()

    def test_same_extension(self, dirs):
        src, dest = dirs
        (src / "foo.d.ts").write_text("export declare const foo: number;\n")

        result = copy_family(str(src), "foo", str(dest), ".d.ts", ".d.ts")

        assert result == dest / "foo.d.ts"
        assert result.read_text() == "export declare const foo: number;\n"

    def test_overwrites_existing_destination(self, dirs):
        src, dest = dirs
        (src / "foo.ts").write_text("new")
        (dest / "foo.ts.source").write_text("old content that is longer")

        copy_family(src, "foo", dest, ".ts", ".ts.source")

        assert (dest / "foo.ts.source").read_text() == "new"

    def test_dotted_base_name(self, dirs):
        src, dest = dirs
        (src / "jquery.plugin.js.map").write_text("{}")
        result = copy_family(src, "jquery.plugin", dest, ".js.map", ".js.map")
        assert result.name == "jquery.plugin.js.map"

    def test_missing_source_member(self, dirs):
        src, dest = dirs
        with pytest.raises(IncompleteFamilyError) as exc_info:
            copy_family(src, "foo", dest, ".js.map", ".js.map")
        assert exc_info.value.name == "foo"
        assert exc_info.value.missing_path == str(src / "foo.js.map")
        assert not (dest / "foo.js.map").exists()

    def test_missing_destination_dir_propagates_os_error(self, dirs, tmp_path: Path):
        src, _ = dirs
        (src / "foo.js").write_text("x")
        with pytest.raises(OSError):
            copy_family(src, "foo", tmp_path / "nope", ".js", ".js")

    def test_empty_name(self, dirs):
        src, dest = dirs
        with pytest.raises(ContractViolation):
            copy_family(src, "", dest, ".ts", ".ts.source")
