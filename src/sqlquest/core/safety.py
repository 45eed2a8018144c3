"""Lexical gate that blocks mutating SQL before anything else runs."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

from .models import SafetyVerdict

DENIED_KEYWORDS: Tuple[str, ...] = (
    "INSERT",
    "UPDATE",
    "DELETE",
    "DROP",
    "ALTER",
    "CREATE",
    "TRUNCATE",
    "GRANT",
    "REVOKE",
    "EXECUTE",
)

BLOCKED_MESSAGE = (
    "Security Alert: Only SELECT statements are allowed. "
    "DML/DDL commands are blocked."
)


class SafetyFilter:
    """Case-insensitive whole-word match against a keyword deny-list.

    This is not a parser: a keyword inside a string literal or comment still
    blocks, and ``created_at`` does not match ``CREATE``.
    """

    def __init__(self, denied_keywords: Optional[Iterable[str]] = None):
        self.denied_keywords = tuple(
            k.upper() for k in (denied_keywords or DENIED_KEYWORDS)
        )
        alternatives = "|".join(re.escape(k) for k in self.denied_keywords)
        # \w covers underscores, so identifiers like created_at stay clear.
        self._pattern = re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)", re.IGNORECASE)

    def check(self, query: str) -> SafetyVerdict:
        matches = []
        for match in self._pattern.finditer(query or ""):
            keyword = match.group(0).upper()
            if keyword not in matches:
                matches.append(keyword)

        if not matches:
            return SafetyVerdict(blocked=False)

        return SafetyVerdict(
            blocked=True,
            reason=BLOCKED_MESSAGE,
            matched_keywords=matches,
        )
