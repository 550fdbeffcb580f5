"""
Custom exceptions for xsdiff with helpful error messages.
"""

from pathlib import Path


class XsDiffError(Exception):
    """Base exception for xsdiff errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class ParseFailure(XsDiffError):
    """Schema document could not be read or is not well-formed XML."""

    def __init__(self, path: str | Path | None, cause: Exception):
        self.path = str(path) if path is not None else "<stream>"
        self.cause = cause
        message = f"Failed to parse {self.path}: {cause}"
        suggestion = (
            "Check that the file exists, is readable and contains well-formed XML:\n"
            f"  xmllint --noout {self.path}"
        )
        super().__init__(message, suggestion)


class BatchError(XsDiffError):
    """Errors raised before any comparison job starts."""

    pass


class MissingListingFile(BatchError):
    """Directory mode without the listing file in the second directory."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        message = f"Listing file not found: {self.path}"
        suggestion = (
            "When comparing two folders, the second folder must contain a listing file\n"
            "with one schema file name per line, for example:\n"
            f"  ls *.xsd > {self.path}"
        )
        super().__init__(message, suggestion)


class DirectoryCreationConflict(BatchError):
    """Report directory already exists or cannot be created."""

    def __init__(self, path: str | Path, cause: Exception | None = None):
        self.path = str(path)
        self.cause = cause
        if isinstance(cause, FileExistsError):
            message = f"Report folder already exists: {self.path}"
        elif cause is not None:
            message = f"Failed to create report folder '{self.path}': {cause}"
        else:
            message = f"Failed to create report folder '{self.path}'"
        suggestion = (
            "Choose a different report folder or remove the existing one:\n"
            f"  rm -rf {self.path}"
        )
        super().__init__(message, suggestion)


class InvalidInputError(BatchError):
    """Inputs are neither two files nor two directories."""

    def __init__(self, first: str | Path, second: str | Path):
        self.first = str(first)
        self.second = str(second)
        message = f"Cannot compare '{self.first}' with '{self.second}'"
        suggestion = (
            "Pass either two existing schema files or two existing folders:\n"
            "  xsdiff <file1.xsd> <file2.xsd> [report-output-folder]\n"
            "  xsdiff <folder1> <folder2> [report-output-folder]"
        )
        super().__init__(message, suggestion)


class ResourceMissing(XsDiffError):
    """A bundled static asset could not be located."""

    def __init__(self, name: str):
        self.name = name
        message = f"Failed to read resource {name}"
        suggestion = (
            "This indicates an incomplete installation. Please reinstall xsdiff:\n"
            "  pip install --force-reinstall xsdiff"
        )
        super().__init__(message, suggestion)


class ConfigurationError(XsDiffError):
    """Configuration file errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str):
        message = f"Invalid configuration file: {error_details}"

        suggestion = (
            "Fix the xsdiff.yaml file or remove it to use the defaults.\n"
            "Supported sections: analyzer, batch, report."
        )
        super().__init__(message, suggestion)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, XsDiffError):
        output = f"[red]Error:[/red] {error.message}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {str(error)}"
