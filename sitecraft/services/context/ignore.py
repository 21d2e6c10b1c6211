"""
Ignored path deny-list.

Same gitignore-style list the workbench uses elsewhere, so files hidden
from the editor tree are also never offered as context.
"""

from functools import lru_cache
from typing import Iterable, Optional, Tuple

import pathspec

from sitecraft.core.config import get_settings

IGNORE_PATTERNS: Tuple[str, ...] = (
    "node_modules/**",
    ".git/**",
    "dist/**",
    "build/**",
    ".next/**",
    "coverage/**",
    ".cache/**",
    ".vscode/**",
    ".idea/**",
    "**/*.log",
    "**/.DS_Store",
    "**/npm-debug.log*",
    "**/yarn-debug.log*",
    "**/yarn-error.log*",
    "**/*lock.json",
    "**/*lock.yaml",
)


@lru_cache(maxsize=8)
def _compile(patterns: Tuple[str, ...]) -> pathspec.PathSpec:
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def build_spec(extra: Iterable[str] = ()) -> pathspec.PathSpec:
    """Compile the default deny-list plus any extra patterns."""
    return _compile(IGNORE_PATTERNS + tuple(extra))


def default_spec() -> pathspec.PathSpec:
    return build_spec(get_settings().extra_ignore)


def is_ignored(relative_path: str, spec: Optional[pathspec.PathSpec] = None) -> bool:
    """Check a root-relative path against the deny-list."""
    if spec is None:
        spec = default_spec()
    return spec.match_file(relative_path.lstrip("/"))

