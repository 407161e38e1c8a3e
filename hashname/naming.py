from pathlib import Path

from .models import FileRecord
from .utils import ensure_text


def digest_name(digest: str, ext: str) -> str:
    return f"{digest}.{ext}" if ext else digest


def build_destination(rec: FileRecord, digest: str, output_dir: str | None = None) -> Path:
    """
    Destination for a hashed file: next to the source, or under output_dir if given.
    The output directory is not created here.
    """
    name = digest_name(digest, rec.ext)
    if output_dir is not None:
        dest = Path(output_dir) / name
    else:
        dest = rec.path.with_name(name)
    ensure_text(str(dest), "Could not process filename")
    return dest
