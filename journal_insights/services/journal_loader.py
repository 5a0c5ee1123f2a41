"""Load journal entries from a directory of markdown files with YAML front matter."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ..models import JournalEntry

logger = logging.getLogger(__name__)

_FRONT_MATTER_RE = re.compile(r"\A---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)


def split_front_matter(content: str) -> Tuple[Dict[str, Any], str]:
    """Return ``(attributes, body)``; attributes are empty without front matter."""
    match = _FRONT_MATTER_RE.match(content)
    if not match:
        return {}, content
    attributes = yaml.safe_load(match.group(1)) or {}
    if not isinstance(attributes, dict):
        raise ValueError("front matter is not a mapping")
    return attributes, content[match.end():]


def _coerce_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def read_journal_entries(journal_dir: str | Path) -> List[JournalEntry]:
    """Read every ``*.md`` file in *journal_dir*, oldest file name first.

    Files without a ``date`` or with an empty body are skipped, as are files
    that cannot be read or whose front matter is malformed.
    """
    directory = Path(journal_dir)
    if not directory.is_dir():
        logger.error("Journal directory not found: %s", directory)
        return []

    entries: List[JournalEntry] = []
    for path in sorted(directory.glob("*.md")):
        try:
            attributes, body = split_front_matter(path.read_text(encoding="utf-8-sig"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as exc:
            logger.warning("Skipping unreadable journal file %s: %s", path.name, exc)
            continue

        entry_date = _coerce_date(attributes.get("date"))
        text = body.strip()
        if entry_date is None or not text:
            logger.info("Skipping %s (missing date or empty text)", path.name)
            continue
        entries.append(JournalEntry(date=entry_date, text=text))

    logger.info("Loaded %d journal entries from %s", len(entries), directory)
    return entries

__all__ = ["split_front_matter", "read_journal_entries"]
