"""Utilities for uniform input handling.

Functions
---------
- read_html_input: Turn a string, path, bytes or file-like object into HTML text
- is_file_like: Check if input is a file-like object
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlist/utils/inputs.py
import logging
import os
from pathlib import Path
from typing import IO, Any, Union

from mdlist.exceptions import FileError, InputError
from mdlist.exceptions import FileNotFoundError as MdlistFileNotFoundError

logger = logging.getLogger(__name__)

HtmlInput = Union[str, Path, bytes, IO[str], IO[bytes]]


def is_file_like(obj: Any) -> bool:
    """Check if an object is file-like (has a callable ``read``)."""
    return hasattr(obj, "read") and callable(obj.read)


def _looks_like_markup(text: str) -> bool:
    return "<" in text or "\n" in text


def _decode(data: bytes, source: str, encoding: str) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise InputError(
            f"Could not decode {source} as {encoding}: {e}", parameter_name="input_data", original_error=e
        ) from e


def _read_file(path: str, encoding: str) -> str:
    logger.debug("Reading HTML from %s", path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileError(f"Failed to read HTML file: {e}", file_path=path, original_error=e) from e
    return _decode(data, path, encoding)


def read_html_input(input_data: HtmlInput, encoding: str = "utf-8") -> str:
    """Return the HTML text held by or referenced from ``input_data``.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes or file-like object
        - String naming an existing file, or HTML content itself
        - ``pathlib.Path`` pointing to an HTML file
        - Raw bytes of an HTML document
        - Text or binary file-like object
    encoding : str, default "utf-8"
        Encoding used for bytes, binary streams and files.

    Returns
    -------
    str
        The HTML source.

    Raises
    ------
    FileNotFoundError
        If a ``Path`` does not exist
    FileError
        If a file exists but cannot be read
    InputError
        If the input type is unsupported or cannot be decoded

    """
    if isinstance(input_data, Path):
        path_str = str(input_data)
        if not input_data.is_file():
            raise MdlistFileNotFoundError(file_path=path_str)
        return _read_file(path_str, encoding)

    if isinstance(input_data, str):
        if not _looks_like_markup(input_data) and os.path.isfile(input_data):
            return _read_file(input_data, encoding)
        return input_data

    if isinstance(input_data, (bytes, bytearray)):
        return _decode(bytes(input_data), "bytes input", encoding)

    if is_file_like(input_data):
        content = input_data.read()
        if isinstance(content, (bytes, bytearray)):
            return _decode(bytes(content), "binary stream", encoding)
        if isinstance(content, str):
            return content
        raise InputError(
            f"File-like object returned unsupported type: {type(content).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )

    raise InputError(
        f"Unsupported input type for HTML conversion: {type(input_data).__name__}. "
        "Supported types: HTML strings, path-like, bytes, file-like",
        parameter_name="input_data",
        parameter_value=input_data,
    )
