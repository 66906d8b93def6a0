"""policydiff exception hierarchy, kept free of project imports"""


class PolicyDiffError(Exception):
    """Base exception for all policydiff errors."""


class InvalidInputError(PolicyDiffError, ValueError):
    """Raised when a document or its content is missing, None, or of the wrong type."""


class ComparisonTooLargeError(PolicyDiffError):
    """Raised when a document exceeds the configured max_lines limit."""
