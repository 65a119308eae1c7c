"""Extension based registry of outline writers.

Each writer renders one outline type (see :mod:`fakedata.generators.outline`)
with a third-party library and is registered under the file extensions it
produces.  The registry dispatches on the lower-cased extension of the target
path.

``UnsupportedFormatError`` is raised when writing a file whose extension has no
registered writer.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError

WriterFunc = Callable[..., None]

_WRITERS: dict[str, WriterFunc] = {}


def register_writer(ext: str, func: WriterFunc) -> None:
    """Register a writer for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".pdf"``).  Matching is
        case-insensitive.
    func:
        Callable taking ``(path, outline, **kwargs)``.
    """

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def registered_extensions() -> tuple[str, ...]:
    return tuple(sorted(_WRITERS))


def write_file(path: str | os.PathLike[str], outline: Any, **kwargs: Any) -> None:
    """Render ``outline`` to ``path`` using the writer for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, outline, **kwargs)


def _register_defaults() -> None:
    from .writers.docx_writer import write_docx
    from .writers.jpeg_writer import write_jpeg
    from .writers.odf_writer import write_odp, write_ods, write_odt
    from .writers.pdf_writer import write_pdf
    from .writers.pptx_writer import write_pptx
    from .writers.xlsx_writer import write_xlsx

    register_writer(".pdf", write_pdf)
    register_writer(".jpeg", write_jpeg)
    register_writer(".jpg", write_jpeg)
    register_writer(".xlsx", write_xlsx)
    # Legacy extension, OOXML content.
    register_writer(".xls", write_xlsx)
    register_writer(".ods", write_ods)
    register_writer(".docx", write_docx)
    register_writer(".odt", write_odt)
    register_writer(".pptx", write_pptx)
    register_writer(".odp", write_odp)


_register_defaults()

__all__ = [
    "WriterFunc",
    "get_extension",
    "register_writer",
    "registered_extensions",
    "write_file",
]
