"""Exception hierarchy for the assistant.

Every error the application raises on purpose derives from ``AssistantError``
so callers can catch project errors without swallowing programming bugs.
"""


class AssistantError(Exception):
    """Base class for all assistant errors."""


class ConfigError(AssistantError):
    """A required credential or setting is missing or invalid."""


class InputValidationError(AssistantError):
    """User-supplied input was rejected before reaching the model."""


class ToolError(AssistantError):
    """A tool could not produce output for the model."""


class SearchError(ToolError):
    """The search backend call failed (network, credentials, quota)."""


class GenerationError(AssistantError):
    """The model backend call failed or never produced a final answer."""


class ReadlineError(AssistantError):
    """The terminal input stream was closed or interrupted."""
