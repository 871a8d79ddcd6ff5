"""
Title Text Repair

Course authoring exports sometimes carry UTF-8 punctuation that was decoded
as Windows-1252, e.g. "â€™" instead of a right single quote.
"""

import re
import unicodedata
from typing import List, Tuple


# Applied in order, before decomposition. The em and en dash rules share a
# pattern and are shadowed by the bare "â€" rule; kept as exported.
MOJIBAKE_FIXES: List[Tuple[str, str]] = [
    ('â€™', "'"),   # right single quote
    ('â€œ', '"'),   # left double quote
    ('â€', '"'),    # right double quote
    ('â€"', '—'),   # em dash
    ('â€"', '–'),   # en dash
    ('Â', ''),      # stray non-breaking space marker
]

COMBINING_MARKS = re.compile(r'[\u0300-\u036f]')


def repair_encoding(text: str) -> str:
    """
    Fix known mojibake sequences, then strip combining diacritics

    Args:
        text: Title text as found in the course XML

    Returns:
        Repaired text
    """
    for broken, fixed in MOJIBAKE_FIXES:
        text = text.replace(broken, fixed)

    text = unicodedata.normalize('NFD', text)
    return COMBINING_MARKS.sub('', text)
