"""Exception hierarchy for the s3source package."""


class S3SourceError(Exception):
    """Base exception for all s3source errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(S3SourceError):
    """Raised when source configuration is missing or invalid."""

    pass


class PropertyMapError(ConfigurationError):
    """Raised when fileSystemProperties is not a JSON object of strings."""

    pass


class SchemaError(ConfigurationError):
    """Raised when a declared schema cannot be parsed."""

    pass


class MacroError(S3SourceError):
    """Raised when a macro cannot be resolved from runtime arguments."""

    pass


class PluginError(S3SourceError):
    """Raised when plugin or format registry operations fail."""

    pass
