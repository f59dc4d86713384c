"""Custom exceptions for ts-stager."""


class StagerError(Exception):
    """Base exception for all staging errors."""


class ContractViolation(StagerError):
    """Raised when a required input is missing or empty."""


class DescriptorLoadError(StagerError):
    """Raised when a project file cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load project '{path}': {reason}")


class StagingError(StagerError):
    """Raised when a file family cannot be staged."""


class IncompleteFamilyError(StagingError):
    """Raised when one member of a file family is missing on disk."""

    def __init__(self, name: str, missing_path: str):
        self.name = name
        self.missing_path = missing_path
        super().__init__(
            f"Incomplete file family '{name}': {missing_path} does not exist"
        )


class SourceMapError(StagingError):
    """Raised in strict mode when a source map has an unexpected shape."""
