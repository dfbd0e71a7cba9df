"""Agent Composer exception hierarchy.

All public exceptions inherit from AgentComposerError, giving callers a single
base class to catch when they want to handle any Agent Composer failure
without swallowing unrelated errors.
"""


class AgentComposerError(Exception):
    """Base exception for all Agent Composer errors."""


class RootUnreadableError(AgentComposerError):
    """Raised when the scan root does not exist or cannot be listed.

    This is the only failure that aborts a whole scan. Unreadable
    subdirectories and files degrade to "contributes nothing" instead.
    """


class ParseError(AgentComposerError):
    """Raised when an agent file cannot be read.

    Covers missing files (deleted between discovery and parsing),
    permission errors, and other I/O failures while reading content.
    Malformed front matter never raises this error.
    """


class FrontMatterError(AgentComposerError):
    """Raised when a front matter block is present but is not valid YAML.

    The metadata extractor catches this, logs a warning, and falls back to
    treating the whole file as body text.
    """


class ServerError(AgentComposerError):
    """Raised when the local preview server cannot be started.

    Covers exhausting the port search range and bind failures.
    """
