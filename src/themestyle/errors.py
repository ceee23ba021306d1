"""
Error types for themestyle.

Style resolution itself never raises: absent or malformed prop values simply
contribute no declarations. Errors only exist at the edges (theme loading,
command line).
"""


class ThemeStyleError(Exception):
    """Base exception for all themestyle errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ThemeLoadError(ThemeStyleError):
    """
    Raised when a theme file cannot be loaded.

    Examples:
    - File does not exist
    - Invalid YAML or JSON
    - Payload fails Theme validation (negative breakpoint, wrong types)
    """

    pass
