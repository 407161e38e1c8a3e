import os
from argparse import Namespace
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

@dataclass(frozen=True)
class Options:
    verbose: bool = False
    force_rehash: bool = False
    force_rename: bool = False
    dry_run: bool = False
    copy: bool = False
    output_dir: Optional[str] = None
    inputs: Tuple[str, ...] = ()
    jobs: int = field(default_factory=lambda: os.cpu_count() or 1)

    @classmethod
    def from_namespace(cls, ns: Namespace) -> "Options":
        return cls(
            verbose=ns.verbose,
            force_rehash=ns.force_rehash,
            force_rename=ns.force_rename,
            dry_run=ns.dry_run,
            copy=ns.copy,
            output_dir=ns.output_dir,
            inputs=tuple(ns.files),
            jobs=ns.jobs or os.cpu_count() or 1,
        )

@dataclass(frozen=True)
class FileRecord:
    path: Path
    stem: str
    ext: str  # without the dot, "" if none

@dataclass(frozen=True)
class RenameResult:
    src: Path
    dst: Path
    performed: bool  # False if dry-run or src is already dst

@dataclass(frozen=True)
class Outcome:
    """What happened to one input: a destination, or the reason it was skipped."""
    source: str
    destination: Optional[str] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.destination is not None
