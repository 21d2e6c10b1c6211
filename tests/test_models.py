"""
Tests for Sitecraft models

Tests cover:
- Message content union and text extraction
- langchain-core message conversion
- ContextOptions validation
- BoostWeights ordering
- FileMap validation
"""

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage, ToolMessage
from pydantic import TypeAdapter, ValidationError

from sitecraft.models.context import DEFAULT_BOOST_WEIGHTS, BoostWeights, ContextOptions, ScoredFile
from sitecraft.models.files import FileEntry, FileMap, FolderEntry, is_text_file
from sitecraft.models.messages import ImagePart, Message, TextPart, extract_text


class TestMessages:
    """Message text extraction."""

    def test_plain_text(self):
        assert extract_text(Message.user("change the header")) == "change the header"

    def test_first_text_part_wins(self):
        message = Message(role="user", content=[
            ImagePart(image="https://example.com/a.png"),
            TextPart(text="make this the hero image"),
            TextPart(text="and the footer"),
        ])

        assert extract_text(message) == "make this the hero image"

    def test_no_text_part(self):
        message = Message(role="user", content=[ImagePart(image="https://example.com/a.png")])

        assert extract_text(message) == ""

    def test_parts_from_dicts(self):
        message = Message.model_validate({
            "role": "user",
            "content": [{"type": "text", "text": "hello"}],
        })

        assert isinstance(message.content[0], TextPart)

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            Message(role="tool", content="x")


class TestLangchainConversion:
    """Messages coming from agent graphs."""

    def test_human_message(self):
        message = Message.from_langchain(HumanMessage(content="update menu prices"))

        assert message.role == "user"
        assert extract_text(message) == "update menu prices"

    def test_ai_and_system_messages(self):
        assert Message.from_langchain(AIMessage(content="done")).role == "assistant"
        assert Message.from_langchain(SystemMessage(content="rules")).role == "system"

    def test_multimodal_content(self):
        lc_message = HumanMessage(content=[
            {"type": "image_url", "image_url": {"url": "https://example.com/a.png"}},
            {"type": "text", "text": "use this photo"},
        ])

        message = Message.from_langchain(lc_message)

        assert isinstance(message.content[0], ImagePart)
        assert message.content[0].image == "https://example.com/a.png"
        assert extract_text(message) == "use this photo"

    def test_unsupported_type(self):
        with pytest.raises(ValueError, match="ToolMessage"):
            Message.from_langchain(ToolMessage(content="ok", tool_call_id="call_1"))


class TestContextOptions:
    """Options defaults and bounds."""

    def test_defaults(self):
        options = ContextOptions()

        assert options.recently_edited == []
        assert options.chat_history == []
        assert options.max_files == 12

    def test_camel_case_aliases(self):
        options = ContextOptions.model_validate({
            "recentlyEdited": ["Hero.tsx"],
            "chatHistory": ["hi"],
            "maxFiles": 20,
        })

        assert options.recently_edited == ["Hero.tsx"]
        assert options.max_files == 20

    @pytest.mark.parametrize("value", [0, 31, -1])
    def test_max_files_bounds(self, value):
        with pytest.raises(ValidationError):
            ContextOptions(max_files=value)

    @pytest.mark.parametrize("value", [1, 30])
    def test_max_files_limits_allowed(self, value):
        assert ContextOptions(max_files=value).max_files == value


class TestBoostWeights:
    """Weight ordering."""

    def test_defaults(self):
        weights = DEFAULT_BOOST_WEIGHTS

        assert (weights.core, weights.recently_edited, weights.keyword_match,
                weights.grep_match, weights.chat_mention) == (10, 8, 5, 5, 3)

    def test_ordering_enforced(self):
        with pytest.raises(ValidationError):
            BoostWeights(chat_mention=9)

    def test_keyword_and_grep_must_match(self):
        with pytest.raises(ValidationError):
            BoostWeights(grep_match=6)

    def test_custom_consistent_weights(self):
        weights = BoostWeights(core=20, recently_edited=16, keyword_match=10, grep_match=10, chat_mention=6)

        assert weights.core == 20

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_BOOST_WEIGHTS.core = 1


class TestScoredFile:

    def test_add_accumulates(self):
        scored = ScoredFile(path="src/App.tsx")
        scored.add(10, "core")
        scored.add(5, "keyword:main")

        assert scored.score == 15
        assert scored.signals == ["core", "keyword:main"]


class TestFileMap:
    """FileMap validation."""

    def test_validates_raw_entries(self):
        files = TypeAdapter(FileMap).validate_python({
            "/home/project/src/App.tsx": {"type": "file", "content": "app", "isBinary": False},
            "/home/project/public/a.png": {"type": "file", "content": "", "isBinary": True},
            "/home/project/src": {"type": "folder"},
            "/home/project/ghost": None,
        })

        assert isinstance(files["/home/project/src/App.tsx"], FileEntry)
        assert files["/home/project/public/a.png"].is_binary is True
        assert isinstance(files["/home/project/src"], FolderEntry)
        assert files["/home/project/ghost"] is None

    def test_unknown_entry_type(self):
        with pytest.raises(ValidationError):
            TypeAdapter(FileMap).validate_python({"x": {"type": "symlink"}})

    def test_is_text_file(self):
        assert is_text_file(FileEntry(content="a"))
        assert not is_text_file(FileEntry(content="", is_binary=True))
        assert not is_text_file(FolderEntry())
        assert not is_text_file(None)
