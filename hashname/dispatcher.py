import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, Iterator

from .classifier import FileClassifier
from .errors import SkipFile
from .hasher import sha256_file
from .models import Options, Outcome
from .mover import SafeMover
from .naming import build_destination

logger = logging.getLogger(__name__)

class Dispatcher:
    """
    Runs classify -> hash -> name -> guard -> move for every path on a thread pool.
    A failure on one path becomes a skipped Outcome and never touches the others.
    Outcomes are yielded in completion order.
    """

    def __init__(self, options: Options):
        self.options = options
        self.classifier = FileClassifier(options)
        self.mover = SafeMover(options)

    def process_one(self, raw: str) -> Outcome:
        try:
            rec = self.classifier.classify(raw)
            digest = sha256_file(rec.path)
            dest = build_destination(rec, digest, self.options.output_dir)
            result = self.mover.move_one(rec.path, dest)
        except (SkipFile, OSError) as e:
            logger.debug("%s: skipped (%s)", raw, e)
            return Outcome(source=raw, reason=str(e))
        logger.debug("%s: -> %s (performed=%s)", raw, result.dst, result.performed)
        return Outcome(source=raw, destination=str(result.dst))

    def run(self, paths: Iterable[str]) -> Iterator[Outcome]:
        paths = list(paths)
        if self.options.jobs <= 1:
            for p in paths:
                yield self.process_one(p)
            return

        logger.debug("Processing %d path(s) with %d workers", len(paths), self.options.jobs)
        with ThreadPoolExecutor(max_workers=self.options.jobs) as pool:
            futures = [pool.submit(self.process_one, p) for p in paths]
            for fut in as_completed(futures):
                yield fut.result()
