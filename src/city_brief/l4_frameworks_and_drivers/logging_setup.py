"""Console and optional file logging setup."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_FORMAT = '%(asctime)s %(levelname)s %(message)s'


def setup_logging(*, verbose: bool = False, log_file: Path | None = None) -> None:
    """Attach handlers to the ``cb`` logger.

    The stderr handler shows warnings and errors, or everything when
    *verbose*. The optional file handler always gets DEBUG.
    """
    root = logging.getLogger('cb')
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(file_handler)
        logging.getLogger('cb.cli').info('Debug logging started → %s', log_file)
