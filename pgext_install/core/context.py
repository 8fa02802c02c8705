"""
Run context — the per-invocation state threaded through every step.

Holds the two pieces of mutable state an install run has: the private
scratch directory the artifact is downloaded and unpacked into, and the
advisories collected along the way. The scratch directory exists only
inside ``open_run_context()`` and is removed on every exit path.

Design notes:
    - Explicit value, not a module singleton: each step takes the
      context as an argument, so tests can build one around tmp_path.
    - Warnings are advisory. Recording one never changes control flow.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """State owned by a single install run."""

    work_dir: Path
    warnings: list[str] = field(default_factory=list)
    on_warning: Callable[[str], None] | None = None

    def warn(self, message: str) -> None:
        """Record an advisory and hand it to the operator-facing printer."""
        logger.info("Advisory: %s", message)
        self.warnings.append(message)
        if self.on_warning is not None:
            self.on_warning(message)


@contextmanager
def open_run_context(
    on_warning: Callable[[str], None] | None = None,
    prefix: str = "pgext-install-",
) -> Iterator[RunContext]:
    """Create a run context backed by a fresh temporary directory.

    The directory and everything in it are removed when the block
    exits, whether it returns or raises.
    """
    work_dir = Path(tempfile.mkdtemp(prefix=prefix))
    logger.debug("Work directory: %s", work_dir)
    try:
        yield RunContext(work_dir=work_dir, on_warning=on_warning)
    finally:
        shutil.rmtree(work_dir, ignore_errors=True)
        logger.debug("Removed work directory %s", work_dir)
