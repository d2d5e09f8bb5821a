"""Validation and normalisation helpers for wizard input.

All functions are pure except :func:`is_empty`, which inspects the
filesystem.
"""

from __future__ import annotations

import re
from pathlib import Path

# npm package name limit; OCP app IDs share it.
MAX_APP_ID_LENGTH = 214

IGNORED_DIRECTORY_ENTRIES = frozenset({".git", ".DS_Store", ".gitkeep"})

_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_APP_ID_CHARS_RE = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_GITHUB_USERNAME_RE = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,37}[a-zA-Z0-9])?$")
_TRACKER_ID_RE = re.compile(r"^[a-zA-Z0-9_-]+$")
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E]")


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


def is_empty(path: str | Path) -> bool:
    """Return ``True`` if *path* does not exist or holds no significant entries.

    ``.git``, ``.DS_Store`` and ``.gitkeep`` are ignored.  Any error while
    inspecting the path counts as empty.
    """
    try:
        target = Path(path).resolve()
        if not target.exists():
            return True
        significant = [
            entry for entry in target.iterdir() if entry.name not in IGNORED_DIRECTORY_ENTRIES
        ]
        return not significant
    except OSError:
        return True


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


def to_valid_app_id(name: str) -> str:
    """Convert an arbitrary string into a valid OCP app ID.

    Lowercases, trims, turns whitespace runs into a single hyphen, drops every
    character outside ``[a-z0-9-]``, collapses repeated hyphens, strips edge
    hyphens and truncates to 214 characters.

    Examples::

        to_valid_app_id("My Awesome OCP Tool!") -> "my-awesome-ocp-tool"
        to_valid_app_id("-my-app-") -> "my-app"
    """
    value = _WHITESPACE_RE.sub("-", name.lower().strip())
    value = _INVALID_APP_ID_CHARS_RE.sub("", value)
    value = _HYPHEN_RUN_RE.sub("-", value).strip("-")
    return value[:MAX_APP_ID_LENGTH].rstrip("-")


def to_display_name(app_id: str) -> str:
    """Turn ``my-app`` into ``My App``."""
    return " ".join(word[:1].upper() + word[1:] for word in app_id.split("-"))


# ---------------------------------------------------------------------------
# Format checks
# ---------------------------------------------------------------------------


def is_valid_tracker_id(tracker_id: str) -> bool:
    """Tracker IDs are letters, digits, hyphens and underscores."""
    if not tracker_id or not tracker_id.strip():
        return False
    return _TRACKER_ID_RE.match(tracker_id.strip()) is not None


def is_valid_email(email: str) -> bool:
    """Basic ``local@domain.tld`` shape check, not RFC 5322."""
    if not email or not email.strip():
        return False
    return _EMAIL_RE.match(email.strip()) is not None


def is_valid_github_username(username: str) -> bool:
    """Check a GitHub username: 1-39 chars, alphanumeric edges, hyphens inside.

    Consecutive hyphens are accepted.
    """
    if not username or not username.strip():
        return False
    return _GITHUB_USERNAME_RE.match(username.strip()) is not None


def has_non_printable_chars(value: str) -> bool:
    """Return ``True`` if *value* contains anything outside printable ASCII."""
    return _NON_PRINTABLE_RE.search(value) is not None
