"""Core exceptions for tagpages."""


class TagPagesError(Exception):
    """Base exception for all tagpages errors."""


class InvalidConfigurationError(TagPagesError):
    """Raised when the configuration cannot drive a generation run."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message)


class ConfigLoadError(TagPagesError):
    """Raised when a site configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")


class PostParsingError(TagPagesError):
    """Raised when a post's front matter cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse post at '{path}': {reason}")


class TemplateRenderError(TagPagesError):
    """Raised when a tag layout cannot be loaded or rendered."""

    def __init__(self, layout: str, reason: str) -> None:
        self.layout = layout
        self.reason = reason
        super().__init__(f"Failed to render layout '{layout}': {reason}")
