"""Persist a rendered content record to disk"""

import logging
from pathlib import Path

from stanley.core.models import ContentRecord
from stanley.core.paths import DEFAULT_CONTENT_DIR, content_path
from stanley.core.render import render
from stanley.errors import IOFailure


logger = logging.getLogger(__name__)


def write_content(record: ContentRecord, content_dir: str = DEFAULT_CONTENT_DIR) -> Path:
    """Create (or truncate) the record's file and write the rendered template.

    Parent directories must already exist. Any OS error is raised as
    IOFailure; bytes flushed before the error are left in place.
    """
    path = Path(content_path(record, content_dir))
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(render(record))
    except OSError as e:
        logger.debug("Failed to write %s: %s", path, e)
        raise IOFailure(path, e) from e
    logger.debug("Wrote %s (%s)", path, record.kind.value)
    return path
