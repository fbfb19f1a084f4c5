"""Slug generation for content file names"""

import re

from unidecode import unidecode


_NON_ALNUM_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated ASCII slug.

    Non-ASCII letters are transliterated (Cyrillic, Greek, CJK, accented
    Latin); characters with no ASCII mapping are dropped.
    """
    text = unidecode(text.lower()).lower()
    return _NON_ALNUM_RE.sub('-', text).strip('-')
