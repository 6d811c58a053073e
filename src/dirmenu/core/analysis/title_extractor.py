from __future__ import annotations

"""
Markup Title Extraction Service.

Provides fault-tolerant extraction of the text held by the first
occurrence of a tag in an HTML document. Used to label menu entries with
a page title instead of the raw filename.
"""

import logging
import os
from typing import Optional

from bs4 import BeautifulSoup

from dirmenu.core.pipeline.components.reader import read_file_content

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_first_tag_text(file_path: str, tag_name: str) -> Optional[str]:
    """
    Return the trimmed text of the first tag_name element in a document.

    Whitespace runs inside the text are collapsed to single spaces. I/O
    and parse failures are absorbed so the caller can fall back to the
    filename.

    Args:
        file_path: Path to the HTML document.
        tag_name: Element name to look for (case-insensitive).

    Returns:
        Optional[str]: The text, or None if unreadable, absent or empty.
    """
    # 1. Read File Content
    try:
        source = read_file_content(file_path)
    except OSError as e:
        logger.debug(f"Could not read '{os.path.basename(file_path)}': {e}")
        return None

    # 2. Locate First Occurrence
    try:
        soup = BeautifulSoup(source, "html.parser")
        tag = soup.find(tag_name.lower())
    except Exception as e:
        logger.debug(f"Could not parse '{os.path.basename(file_path)}': {e}")
        return None

    if tag is None:
        return None

    text = " ".join(tag.get_text().split())
    return text or None
