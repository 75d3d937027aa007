from __future__ import annotations

import io
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import pdfplumber
from pdfminer import settings as pdfminer_settings
from pdfminer.pdftypes import PDFStream, resolve1

from .content_stream import parse_operations
from .errors import ContainerError, PageReadError
from .models import Operation

logger = logging.getLogger(__name__)

PdfSource = Union[str, "os.PathLike[str]", bytes, bytearray, memoryview]


def _describe(source: PdfSource) -> str:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return f"<{len(source)} bytes>"
    return str(source)


@contextmanager
def open_document(source: PdfSource):
    """
    Open a PDF from a filesystem path or an in-memory buffer.

    Any failure to open or parse the container is raised as ContainerError.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        target = io.BytesIO(bytes(source))
    else:
        target = Path(source)
        if not target.is_file():
            raise ContainerError(f"Failed to open PDF file: {target} does not exist")
    try:
        pdf = pdfplumber.open(target)
    except Exception as e:
        raise ContainerError(f"Failed to load PDF from {_describe(source)}: {e}") from e
    try:
        yield pdf
    finally:
        pdf.close()


@contextmanager
def _strict_pdfminer():
    previous = pdfminer_settings.STRICT
    pdfminer_settings.STRICT = True
    try:
        yield
    finally:
        pdfminer_settings.STRICT = previous


def _content_streams(page, page_index: int) -> List[PDFStream]:
    """
    Resolve and decode the page's /Contents entries.

    pdfminer substitutes empty data for dangling references and corrupt
    filters unless strict, so decoding runs strict here and any failure
    is a PageReadError.
    """
    attrs = getattr(page.page_obj, "attrs", None) or {}
    value = attrs.get("Contents")
    if value is None:
        return []
    resolved = resolve1(value)
    if resolved is None:
        raise PageReadError(page_index, f"/Contents {value!r} does not resolve")
    items = resolved if isinstance(resolved, list) else [resolved]
    streams: List[PDFStream] = []
    for item in items:
        strm = resolve1(item)
        if not isinstance(strm, PDFStream):
            raise PageReadError(page_index, f"/Contents entry {item!r} is not a stream")
        streams.append(strm)
    try:
        with _strict_pdfminer():
            for strm in streams:
                strm.get_data()
    except Exception as e:
        raise PageReadError(page_index, f"cannot decode content stream: {e}") from e
    return streams


def _page_operations(page, page_index: int) -> Optional[List[Operation]]:
    streams = _content_streams(page, page_index)
    if not streams:
        return None
    try:
        return parse_operations(streams)
    except Exception as e:
        raise PageReadError(page_index, str(e)) from e


def iter_page_operations(pdf, skip_pages: int = 1) -> Iterator[Tuple[int, Optional[List[Operation]]]]:
    """
    Yield (page_index, operations) in document order. Operations are None
    when the page has no content stream.
    """
    try:
        pages = pdf.pages
    except Exception as e:
        raise ContainerError(f"Failed to read page tree: {e}") from e
    for page_index, page in enumerate(pages):
        if page_index < skip_pages:
            continue
        yield page_index, _page_operations(page, page_index)
