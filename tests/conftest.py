from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   being installed.
2. Provides filesystem fixtures (plain and .NET-style projects) and
   configuration helpers shared across unit, integration and e2e tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from codebase_scanner.domain.config import ScanConfiguration  # noqa: E402

# -----------------------------------------------------------------------------
# Sample Content
# -----------------------------------------------------------------------------

VALID_CSPROJ = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
    <Nullable>enable</Nullable>
  </PropertyGroup>
  <ItemGroup>
    <PackageReference Include="Newtonsoft.Json" Version="13.0.3" />
    <PackageReference Include="Serilog" Version="3.1.1" />
  </ItemGroup>
</Project>
"""

MALFORMED_CSPROJ = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
  </ItemGroup>
</Project>
"""

SOLUTION_TEMPLATE = """Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 17
Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "{a}", "{a}\\{a}.csproj", "{{11111111-1111-1111-1111-111111111111}}"
EndProject
Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "{b}", "{b}\\{b}.csproj", "{{22222222-2222-2222-2222-222222222222}}"
EndProject
Global
EndGlobal
"""

# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def make_tree() -> Callable[[Path, Dict[str, Any]], Path]:
    """
    Return a helper that materializes a nested dict as files and folders.

    Keys ending in '/' (or mapping to dicts) are directories; string values
    are file contents.
    """
    def _make(base: Path, layout: Dict[str, Any]) -> Path:
        base.mkdir(parents=True, exist_ok=True)
        for name, value in layout.items():
            target = base / name.rstrip("/")
            if isinstance(value, dict):
                _make(target, value)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(value.encode("utf-8"))
        return base

    return _make


@pytest.fixture
def proj(tmp_path: Path, make_tree) -> Path:
    """
    The canonical small project.

    Structure:
    /proj
      /src
        a.py            -> print(1)
      /node_modules
        x.py            (ignored by default)
    """
    return make_tree(tmp_path / "proj", {
        "src": {"a.py": "print(1)"},
        "node_modules": {"x.py": "print('ignored')"},
    })


@pytest.fixture
def dotnet_project(tmp_path: Path, make_tree) -> Path:
    """
    A solution referencing one valid and one malformed project.

    Structure:
    /app
      App.sln
      /Api
        Api.csproj      (valid)
        Program.cs
      /Broken
        Broken.csproj   (malformed XML)
    """
    return make_tree(tmp_path / "app", {
        "App.sln": SOLUTION_TEMPLATE.format(a="Api", b="Broken"),
        "Api": {
            "Api.csproj": VALID_CSPROJ,
            "Program.cs": 'Console.WriteLine("hi");',
        },
        "Broken": {"Broken.csproj": MALFORMED_CSPROJ},
    })


@pytest.fixture
def scan_config() -> Callable[..., ScanConfiguration]:
    """Factory for ScanConfiguration instances with defaults applied."""
    def _config(root: Path, **kwargs: Any) -> ScanConfiguration:
        return ScanConfiguration(root_path=str(root), **kwargs)

    return _config
