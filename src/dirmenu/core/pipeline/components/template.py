from __future__ import annotations

"""
Template Placeholder Splicing.

Substitutes named values verbatim into the placeholder regions of a host
HTML document. A region is written as:

    <TEMPLATEITEM name="menu">...</TEMPLATEITEM>

Only the inner content is replaced; the markers are preserved so that the
same document can be filled again later.
"""

import logging
import re
from typing import Dict

from dirmenu.core.pipeline.components.reader import read_file_content

logger = logging.getLogger(__name__)

_ITEM_RX = re.compile(
    r"(?P<open><TEMPLATEITEM\s+name\s*=\s*(?P<quote>['\"]?)(?P<name>[^'\"\s>]+)(?P=quote)\s*>)"
    r"(?P<body>.*?)"
    r"(?P<close></TEMPLATEITEM\s*>)",
    re.IGNORECASE | re.DOTALL,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def fill_template(document: str, items: Dict[str, str]) -> str:
    """
    Replace the content of every named placeholder region found in items.

    Regions whose name is not in items are left untouched.

    Args:
        document: Host HTML document.
        items: Placeholder name -> markup to splice in.

    Returns:
        str: The filled document.
    """
    filled = set()

    def _substitute(match: re.Match) -> str:
        name = match.group("name")
        if name not in items:
            return match.group(0)
        filled.add(name)
        return match.group("open") + items[name] + match.group("close")

    result = _ITEM_RX.sub(_substitute, document)

    for name in items:
        if name not in filled:
            logger.warning(f"Template has no placeholder named '{name}'.")

    return result


def fill_template_file(template_path: str, items: Dict[str, str]) -> str:
    """
    Read a template from disk and fill its placeholders.

    Raises:
        OSError: If the template cannot be read.
    """
    return fill_template(read_file_content(template_path), items)
