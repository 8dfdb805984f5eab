from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the default ignore set, the tracked extension stack, the
syntax-highlighting map, and the markers used to recognize solution and
project manifests.
"""

from typing import Dict, FrozenSet

APP_NAME = "codebase-scanner"
APP_VERSION = "1.0.2"

DEFAULT_OUTPUT_FILE = "codebase-documentation.md"
DEFAULT_TOKEN_MODEL = "gpt-4o"

# -----------------------------------------------------------------------------
# SCAN DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_IGNORED_DIRS: FrozenSet[str] = frozenset({
    ".git",
    "node_modules",
    "dist",
    "build",
    "bin",
    "obj",
    "packages",
    ".vs",
})

DEFAULT_EXTENSIONS: FrozenSet[str] = frozenset({
    # C# and .NET
    ".cs", ".csproj", ".sln", ".config", ".cshtml", ".razor",
    # Web
    ".html", ".css", ".js", ".jsx", ".ts", ".tsx",
    # Other common sources
    ".py", ".java", ".cpp", ".h",
})

# -----------------------------------------------------------------------------
# SYNTAX HIGHLIGHTING
# -----------------------------------------------------------------------------

LANGUAGE_TAGS: Dict[str, str] = {
    ".cs": "csharp",
    ".csproj": "xml",
    ".sln": "text",
    ".config": "xml",
    ".cshtml": "cshtml",
    ".razor": "cshtml",
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".html": "html",
    ".css": "css",
    ".py": "python",
    ".java": "java",
    ".cpp": "cpp",
    ".h": "cpp",
}

# -----------------------------------------------------------------------------
# BUILD MANIFESTS
# -----------------------------------------------------------------------------

SOLUTION_SUFFIX = ".sln"
PROJECT_SUFFIX = ".csproj"
PROJECT_DECLARATION_MARKER = 'Project("{'
