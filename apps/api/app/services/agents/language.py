from __future__ import annotations

import re

ARABIC_THRESHOLD = 0.3

_ARABIC_CHAR = re.compile(r"[\u0600-\u06FF]")
_WHITESPACE = re.compile(r"\s")


def arabic_ratio(text: str) -> float:
    total = len(_WHITESPACE.sub("", text))
    if total == 0:
        return 0.0
    return len(_ARABIC_CHAR.findall(text)) / total


def is_arabic_text(text: str) -> bool:
    return bool(_ARABIC_CHAR.search(text)) and arabic_ratio(text) > ARABIC_THRESHOLD


def language_instruction(text: str, subject: str = "metadata") -> str:
    if is_arabic_text(text):
        return f"IMPORTANT: Write ALL {subject} in Arabic (العربية)"
    return f"IMPORTANT: Write ALL {subject} in English"
