"""Front-matter template and rendering for new notes and posts"""

import re

from stanley.core.models import ContentRecord


TEMPLATE = """\
---
title:  "{title}"
description: ""
date: {date}
template: "{template}.html"
draft: true
taxonomies:
  {taxonomies}
---
"""

PLACEHOLDER_RE = re.compile(r'\{(title|date|template|taxonomies)\}')


def render(record: ContentRecord) -> str:
    """Fill TEMPLATE from the record in a single pass.

    Substituted values are never rescanned, so a title that itself contains
    `{date}` is written literally. The title is inserted verbatim, unescaped.
    """
    spec = record.kind.spec
    values = {
        "title": record.title,
        "date": record.created_at.isoformat(),
        "template": spec.template,
        "taxonomies": spec.taxonomy,
    }
    return PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], TEMPLATE)
