import re
import sys
from typing import Tuple

from .errors import PathEncodingError

DIGEST_RE = re.compile(r"[0-9a-f]{64}")


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a base name at its last dot into (stem, extension).
    A leading dot alone does not start an extension: '.bashrc' -> ('.bashrc', '').
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return name, ""
    return stem, ext


def looks_like_digest(stem: str) -> bool:
    return DIGEST_RE.fullmatch(stem) is not None


def ensure_text(value: str, reason: str | None = None) -> str:
    """Return value unchanged if it survives a strict round trip through the filesystem encoding."""
    try:
        value.encode(sys.getfilesystemencoding(), errors="strict")
    except UnicodeEncodeError:
        raise PathEncodingError(reason) from None
    return value
