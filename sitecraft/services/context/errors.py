"""Context selection errors."""


class ContextSelectionError(Exception):
    """Base exception for context selection failures."""
    pass


class NoUserMessageError(ContextSelectionError):
    """The message list has no user-role entry, so there is no query."""

    def __init__(self, message: str = "No user message found"):
        super().__init__(message)


class NoFilesSelectedError(ContextSelectionError):
    """Scoring and grep together selected nothing for a project."""

    def __init__(self, message: str = "Context selection failed to find relevant files"):
        super().__init__(message)


NoUserMessage = NoUserMessageError
NoFilesSelected = NoFilesSelectedError
