"""
Markup parsing for the audit engine.
"""

from __future__ import annotations

import structlog
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

logger = structlog.get_logger(__name__)

# Built-in backend: it keeps attribute order, never invents <tbody>/<html>
# wrappers and records source lines on every tag.
PARSER = "html.parser"


def parse_document(source: str) -> BeautifulSoup:
    """Parse markup into a queryable node tree.

    Malformed markup degrades the way browsers degrade. Markup the backend
    rejects outright yields an empty tree so the audit can continue.
    """
    try:
        return BeautifulSoup(source, PARSER)
    except ParserRejectedMarkup as e:
        logger.warning("Parser rejected markup, auditing an empty document", error=str(e))
        return BeautifulSoup("", PARSER)
