"""Data models shared by the context engine and its API."""

from sitecraft.models.files import FileEntry, FolderEntry, FileMap, is_text_file
from sitecraft.models.messages import Message, TextPart, ImagePart, extract_text
from sitecraft.models.context import (
    ContextOptions,
    BoostWeights,
    ScoredFile,
    SelectionReport,
    DEFAULT_BOOST_WEIGHTS,
)

__all__ = [
    "FileEntry",
    "FolderEntry",
    "FileMap",
    "is_text_file",
    "Message",
    "TextPart",
    "ImagePart",
    "extract_text",
    "ContextOptions",
    "BoostWeights",
    "ScoredFile",
    "SelectionReport",
    "DEFAULT_BOOST_WEIGHTS",
]
