"""Shared pytest fixtures for ts-stager tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"


def project_xml(
    references: list[str] | None = None,
    sources: list[str] | None = None,
    namespaced: bool = True,
) -> str:
    """Render a minimal MSBuild project file."""
    refs = "".join(f'    <ProjectReference Include="{r}" />\n' for r in references or [])
    srcs = "".join(f'    <TypeScriptCompile Include="{s}" />\n' for s in sources or [])
    xmlns = f' xmlns="{MSBUILD_NS}"' if namespaced else ""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<Project ToolsVersion="12.0"{xmlns}>\n'
        "  <ItemGroup>\n"
        f"{refs}"
        "  </ItemGroup>\n"
        "  <ItemGroup>\n"
        f"{srcs}"
        "  </ItemGroup>\n"
        "</Project>\n"
    )


@pytest.fixture
def write_project():
    def _write(
        path: Path,
        references: list[str] | None = None,
        sources: list[str] | None = None,
        namespaced: bool = True,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(project_xml(references, sources, namespaced), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_family():
    """Write the four compiler outputs for one .ts source."""

    def _write(directory: Path, name: str, map_content: str | None = None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / f"{name}.ts").write_text(f"export const {name} = 1;\n")
        (directory / f"{name}.d.ts").write_text(f"export declare const {name}: number;\n")
        (directory / f"{name}.js").write_text(
            f"exports.{name} = 1;\n//# sourceMappingURL={name}.js.map\n"
        )
        if map_content is None:
            map_content = json.dumps(
                {"version": 3, "file": f"{name}.js", "sources": [f"{name}.ts"], "mappings": "AAAA"},
                separators=(",", ":"),
            )
        (directory / f"{name}.js.map").write_text(map_content)
        return directory / f"{name}.ts"

    return _write


@pytest.fixture
def solution(tmp_path: Path, write_project, write_family) -> Path:
    """App references Lib, Lib references Core; returns App's project path.

    tmp/App/App.csproj       -> ..\\Lib\\Lib.csproj
    tmp/Lib/Lib.csproj       -> ..\\Core\\Core.csproj, sources util.ts, types.d.ts
    tmp/Core/Core.csproj     -> sources src/base.ts
    """
    write_family(tmp_path / "Lib", "util")
    (tmp_path / "Lib" / "types.d.ts").write_text("declare type T = number;\n")
    write_family(tmp_path / "Core" / "src", "base")
    write_project(
        tmp_path / "Core" / "Core.csproj",
        sources=["src\\base.ts"],
    )
    write_project(
        tmp_path / "Lib" / "Lib.csproj",
        references=["..\\Core\\Core.csproj"],
        sources=["util.ts", "types.d.ts"],
    )
    write_family(tmp_path / "App", "main")
    return write_project(
        tmp_path / "App" / "App.csproj",
        references=["..\\Lib\\Lib.csproj"],
        sources=["main.ts"],
    )
