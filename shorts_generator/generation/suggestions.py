import re
from typing import List

# Leading "12." / "3. " numbering; "2)" style is left alone
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")


def parse_suggestions(raw: str) -> List[str]:
    """
    Turn a numbered-list response into plain suggestion strings,
    keeping the order in which they appear.
    """
    suggestions = []
    for line in (raw or "").splitlines():
        item = _NUMBER_PREFIX.sub("", line).strip()
        if item:
            suggestions.append(item)
    return suggestions
