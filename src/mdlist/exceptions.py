#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdlist library.

The list handlers never raise: missing or malformed attributes degrade to a
default rendering. Errors are only signalled at the conversion boundary, where
input is read and handed to the parser.

Exception Hierarchy
-------------------
- MdlistError (base exception)

  - ValidationError (parameter/option validation)
    - InputError (unsupported input type)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - MarkdownConversionError (parsing or rendering failures)

"""

from typing import Any


class MdlistError(Exception):
    """Base exception class for all mdlist-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdlistError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InputError(ValidationError):
    """Exception raised when the input cannot be turned into HTML text."""


class FileError(MdlistError):
    """Exception raised for file access problems.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path of the file that caused the error
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with the offending path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize with the missing path and a default message."""
        super().__init__(message or f"File not found: {file_path}", file_path=file_path, original_error=original_error)


class MarkdownConversionError(MdlistError):
    """Exception raised when HTML cannot be converted to Markdown.

    Parameters
    ----------
    message : str
        Description of the failure
    conversion_stage : str, optional
        Stage that failed (e.g. "file_reading", "html_parsing")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, conversion_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the conversion error with the failing stage."""
        super().__init__(message, original_error=original_error)
        self.conversion_stage = conversion_stage


__all__ = [
    "MdlistError",
    "ValidationError",
    "InputError",
    "FileError",
    "FileNotFoundError",
    "MarkdownConversionError",
]
