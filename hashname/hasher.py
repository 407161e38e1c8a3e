import hashlib
from pathlib import Path

CHUNK_SIZE = 64 * 1024


def sha256_file(path: Path, chunk_size: int = CHUNK_SIZE) -> str:
    """Return the lowercase hex SHA-256 of the file, reading it in chunks."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.hexdigest()
