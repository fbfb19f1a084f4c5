"""Derive the on-disk location of a content record"""

from stanley.core.models import ContentRecord
from stanley.core.utils.slug import slugify


DEFAULT_CONTENT_DIR = "content"


def content_path(record: ContentRecord, content_dir: str = DEFAULT_CONTENT_DIR) -> str:
    """Return `<content_dir>/<notes|posts>/<slug>.md` for the record."""
    return f"{content_dir.rstrip('/')}/{record.kind.spec.subdir}/{slugify(record.title)}.md"
