"""Custom exceptions for git-stales"""

from typing import Optional


class GitStalesError(Exception):
    """Base exception for all git-stales errors."""
    pass


class ConfigurationError(GitStalesError):
    """Exception raised for invalid option values or conflicting options."""
    pass


class TrunkNotFoundError(ConfigurationError):
    """Exception raised when the trunk branch cannot be resolved."""

    def __init__(self, trunk: str):
        self.trunk = trunk
        super().__init__(f"Trunk branch '{trunk}' does not exist")


class PatternCompileError(GitStalesError):
    """Exception raised when a keep pattern is not a valid regular expression."""

    def __init__(self, pattern: str, message: Optional[str] = None):
        self.pattern = pattern
        self.message = message

        error_msg = f"Invalid keep pattern '{pattern}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class CollaboratorError(GitStalesError):
    """Exception raised when a git query or mutation fails."""

    def __init__(self, operation: str, subject: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.subject = subject
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if subject:
            error_msg += f" for '{subject}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class UnexpectedOutputError(CollaboratorError):
    """Exception raised when git output does not have the expected shape."""

    def __init__(self, operation: str, output: str, subject: Optional[str] = None):
        self.output = output
        super().__init__(operation, subject, f"Unexpected output {output!r}")
