"""Case-aware substitution of the template marker token.

Three entry points cover the three places the marker shows up, and they
deliberately apply different granularity:

- ``replace_in_text`` rewrites file contents with two literal passes
  (lowercase and uppercase marker only).
- ``rename_directory_name`` classifies every occurrence on its own, so
  ``RN4OH_rn4oh`` keeps one uppercase and one lowercase replacement.
- ``rename_file_name`` classifies the first match of each pattern and
  applies that casing to every match of the pattern.
"""
import re
from typing import Tuple

from rn4oh.core.config import MARKER_TOKEN

__all__ = [
    "case_variant",
    "contains_marker",
    "file_name_patterns",
    "rename_directory_name",
    "rename_file_name",
    "replace_in_text",
]


def case_variant(match: str, base: str) -> str:
    """Return ``base`` cased after the surface form of ``match``.

    Args:
        match: One occurrence of the marker token as found in the source
        base: Project name replacing the marker

    Returns:
        Uppercased base for an uppercase match, lowercased base for a
        lowercase match, capitalized base when only the first character is
        uppercase, and lowercased base for any other mixed form.
    """
    if match == match.upper():
        return base.upper()
    if match == match.lower():
        return base.lower()
    if match[:1] == match[:1].upper():
        return base[:1].upper() + base[1:].lower()
    return base.lower()


def contains_marker(name: str, marker: str = MARKER_TOKEN) -> bool:
    """Return True when ``name`` contains ``marker`` in any casing."""
    return marker.lower() in name.lower()


def replace_in_text(text: str, base: str, marker: str = MARKER_TOKEN) -> str:
    """Replace the lowercase and uppercase literal marker in file contents.

    Mixed-case spellings are left alone.
    """
    text = text.replace(marker.lower(), base.lower())
    return text.replace(marker.upper(), base.upper())


def rename_directory_name(name: str, base: str, marker: str = MARKER_TOKEN) -> str:
    """Replace every marker occurrence in a directory name independently."""
    pattern = re.compile(re.escape(marker), re.IGNORECASE)
    return pattern.sub(lambda found: case_variant(found.group(0), base), name)


def file_name_patterns(marker: str = MARKER_TOKEN) -> Tuple["re.Pattern[str]", ...]:
    """Patterns tried, in order, against file names.

    The first pattern is case-insensitive; the others are literal all-upper,
    capitalized and inverted (``rN4oh``) spellings.
    """
    lower = marker.lower()
    return (
        re.compile(re.escape(lower), re.IGNORECASE),
        re.compile(re.escape(lower.upper())),
        re.compile(re.escape(lower[:1].upper() + lower[1:])),
        re.compile(re.escape(lower[:1] + lower[1:2].upper() + lower[2:])),
    )


def rename_file_name(name: str, base: str, marker: str = MARKER_TOKEN) -> str:
    """Replace marker occurrences in a file name, one casing per pattern.

    For every pattern present in the name, the casing is chosen from the
    pattern's first match and used for all of its matches.
    """
    for pattern in file_name_patterns(marker):
        first = pattern.search(name)
        if first is None:
            continue
        replacement = case_variant(first.group(0), base)
        name = pattern.sub(lambda _found: replacement, name)
    return name
