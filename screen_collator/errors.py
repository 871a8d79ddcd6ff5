"""
Screen Collator Exceptions

Every failure surfaces a single user-facing message; the CLI can render
extra context with format_message().
"""

from typing import Optional, Dict, Any


class ScreenCollatorError(Exception):
    """Base exception for all Screen Collator errors"""

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def format_message(self) -> str:
        """Format error with all details"""
        lines = [f"❌ {self.__class__.__name__}: {self.message}"]

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestion:
            lines.append(f"💡 Suggestion: {self.suggestion}")

        if self.cause:
            lines.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")

        return "\n".join(lines)


class ParseError(ScreenCollatorError):
    """Course document is not well-formed XML"""

    def __init__(self, message: str = "Invalid XML format", **kwargs):
        kwargs.setdefault(
            'suggestion',
            "Export the course again and upload the Course.xml file it contains"
        )
        super().__init__(message, **kwargs)


class ArchiveGenerationError(ScreenCollatorError):
    """Folder archive could not be built"""

    def __init__(self, detail: str, **kwargs):
        super().__init__(f"Failed to create ZIP file: {detail}", **kwargs)
