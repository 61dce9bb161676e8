# src/agentic_docqa/guardrails/parsing.py
"""Fail-closed parsing of fixed-vocabulary judge replies."""

import re
from typing import Iterable

_WORD_RE = re.compile(r"[a-z]+")


def reply_affirms(reply: str, token: str, negatives: Iterable[str] = ("no", "not")) -> bool:
    """True only when the reply leads with ``token`` and carries no negating word.

    "Yes." and "yes, fully supported" affirm; "no", "yes and no", "unsure" and empty replies do not.
    """
    words = _WORD_RE.findall((reply or "").lower())
    if not words or words[0] != token:
        return False
    blocked = set(negatives)
    return not any(w in blocked for w in words[1:])
