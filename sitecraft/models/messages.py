"""
Chat Message Models

Messages arrive from the chat subsystem with either plain string content
or a list of structured parts (text + images). The context engine only
needs the role and the plain text, so content is modelled as a tagged
union with an explicit extraction function instead of shape sniffing.
"""

from typing import Annotated, Any, List, Literal, Union

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, Field


Role = Literal["user", "assistant", "system"]


class TextPart(BaseModel):
    """Plain text part of a structured message."""
    type: Literal["text"] = "text"
    text: str


class ImagePart(BaseModel):
    """Image attachment (URL or data URI). Ignored for text extraction."""
    type: Literal["image"] = "image"
    image: str


Part = Annotated[Union[TextPart, ImagePart], Field(discriminator="type")]


class Message(BaseModel):
    """A single chat message."""
    role: Role
    content: Union[str, List[Part]] = ""

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role="user", content=text)

    @classmethod
    def assistant(cls, text: str) -> "Message":
        return cls(role="assistant", content=text)

    @classmethod
    def from_langchain(cls, message: BaseMessage) -> "Message":
        """
        Convert a langchain-core message into a Message.

        Human/AI/System messages map to user/assistant/system. Any other
        message class (tool results, function calls) is rejected.
        """
        if isinstance(message, HumanMessage):
            role = "user"
        elif isinstance(message, AIMessage):
            role = "assistant"
        elif isinstance(message, SystemMessage):
            role = "system"
        else:
            raise ValueError(f"Unsupported message type: {message.__class__.__name__}")

        if isinstance(message.content, str):
            return cls(role=role, content=message.content)

        return cls(role=role, content=_parts_from_langchain(message.content))


def _parts_from_langchain(blocks: List[Any]) -> List[Union[TextPart, ImagePart]]:
    parts: List[Union[TextPart, ImagePart]] = []
    for block in blocks:
        if isinstance(block, str):
            parts.append(TextPart(text=block))
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(TextPart(text=str(block.get("text", ""))))
        elif isinstance(block, dict) and block.get("type") == "image_url":
            url = block.get("image_url")
            if isinstance(url, dict):
                url = url.get("url", "")
            parts.append(ImagePart(image=str(url or "")))
    return parts


def extract_text(message: Message) -> str:
    """
    Get the plain text of a message.

    String content is returned as-is. For structured content the FIRST
    text part wins; a message with no text part yields "".
    """
    if isinstance(message.content, str):
        return message.content

    for part in message.content:
        if isinstance(part, TextPart):
            return part.text
    return ""
