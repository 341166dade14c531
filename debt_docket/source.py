"""
Fetch the court calendar PDF and read its pages as text lines.
"""
import logging
from pathlib import Path
from typing import List

import pdfplumber
import requests

logger = logging.getLogger(__name__)


class DocketUnavailableError(RuntimeError):
    pass


def download_calendar(url: str, destination: Path, timeout: int = 30) -> Path:
    """
    Download the calendar PDF and save it to ``destination``.

    Raises DocketUnavailableError on any network or HTTP error.
    """
    logger.info(f"Downloading calendar from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise DocketUnavailableError(f"Could not download {url}: {e}") from e

    content_type = response.headers.get("Content-Type", "").lower()
    if "pdf" not in content_type:
        logger.warning(f"{url} does not look like a PDF (Content-Type: {content_type})")

    destination.write_bytes(response.content)
    logger.info(f"Saved {len(response.content)} bytes to {destination}")
    return destination


def read_pages(pdf_path: Path, skip_cover_page: bool = True) -> List[List[str]]:
    """Return each page's text lines in reading order; the cover sheet is dropped by default."""
    try:
        pdf = pdfplumber.open(pdf_path)
    except Exception as e:
        raise DocketUnavailableError(f"Could not open {pdf_path}: {e}") from e

    with pdf:
        pages = pdf.pages[1:] if skip_cover_page else pdf.pages
        texts = []
        for page in pages:
            text = page.extract_text() or ""
            texts.append(text.splitlines())

    logger.info(f"Read {len(texts)} pages from {pdf_path}")
    return texts
