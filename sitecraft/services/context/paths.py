"""
Project path helpers.

The same file can be referred to as "/home/project/src/App.tsx" or
"src/App.tsx". Everything that compares paths goes through normalize()
so both forms behave identically.
"""

from typing import Optional

from sitecraft.core.config import get_settings


def project_root(root: Optional[str] = None) -> str:
    return root if root is not None else get_settings().project_root


def normalize(path: str, root: Optional[str] = None) -> str:
    """Strip the project-root prefix, returning a root-relative path."""
    prefix = project_root(root)
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


def qualify(path: str, root: Optional[str] = None) -> str:
    """Return the root-qualified form of `path`."""
    prefix = project_root(root)
    if path.startswith(prefix):
        return path
    return prefix + path.lstrip("/")


def basename(path: str) -> str:
    """Final path segment without its extension ("src/Hero.tsx" -> "Hero")."""
    name = path.rsplit("/", 1)[-1]
    stem, dot, _ = name.rpartition(".")
    # Dotfiles like ".env" are all extension and come back empty
    return stem if dot else name


def same_file(candidate: str, reference: str, root: Optional[str] = None) -> bool:
    """
    True when `reference` names `candidate`.

    Accepts exact matches after normalization, and references that are a
    trailing run of whole path segments ("Gallery.tsx" names
    "src/components/Gallery.tsx", but not "src/MyGallery.tsx").
    """
    a = normalize(candidate, root)
    b = normalize(reference, root).lstrip("/")
    if not b:
        return False
    return a == b or a.endswith("/" + b)
