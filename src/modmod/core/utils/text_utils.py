import re

_NON_TAG_CHARS = re.compile(r"[^a-z0-9_]+")


def sanitize_tag_name(name: str) -> str:
    """Lower-case ``name`` and collapse everything but letters, digits and
    underscores into single dashes."""
    return _NON_TAG_CHARS.sub("-", name.strip().lower()).strip("-")


def to_numbered_tag(name: str, index: int) -> str:
    """Combine a 1-based position and a name into a sortable directory name.

    >>> to_numbered_tag("Ownership & Borrowing", 3)
    '03-ownership-borrowing'
    """
    slug = sanitize_tag_name(name)
    if not slug:
        return f"{index:02}"
    return f"{index:02}-{slug}"
