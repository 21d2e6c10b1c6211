"""
FileMap Models

In-memory representation of a project's files, as produced by the
workbench file store. The context engine only reads these; it never
mutates or persists them.

Keys are either root-qualified ("/home/project/src/App.tsx") or
root-relative ("src/App.tsx").
"""

from typing import Annotated, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FileEntry(BaseModel):
    """A file with its text content."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["file"] = "file"
    content: str = ""
    # Binary files keep a placeholder in `content` and are never grepped
    is_binary: bool = Field(default=False, alias="isBinary")


class FolderEntry(BaseModel):
    """A directory marker. Carries no content."""
    model_config = ConfigDict(frozen=True)

    type: Literal["folder"] = "folder"


Entry = Annotated[Union[FileEntry, FolderEntry], Field(discriminator="type")]

FileMap = Dict[str, Optional[Entry]]


def is_text_file(entry: Optional[Entry]) -> bool:
    """True for non-binary file entries (the only ones worth scanning)."""
    return isinstance(entry, FileEntry) and not entry.is_binary
