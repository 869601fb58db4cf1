"""
Post export in JSON, CSV and XML.

The XML layout (``<blog><post>...</post></blog>``) is the one Blogger and
WordPress importers accept; post bodies are wrapped in CDATA.
"""

from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence
from xml.sax.saxutils import escape

from ..core.database.entities import Post
from ..core.models.io import PostRead

CSV_HEADER = ["ID", "Title", "Category", "Status", "Created At", "Views", "Likes"]


def _isoformat(value: Optional[datetime]) -> str:
    return value.isoformat() if value is not None else ""


def posts_to_json(posts: Sequence[Post]) -> List[Dict[str, Any]]:
    """Serialize posts to JSON-compatible dicts."""
    return [PostRead.model_validate(post).model_dump(mode="json") for post in posts]


def posts_to_csv(posts: Sequence[Post]) -> str:
    """Render posts as CSV with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for post in posts:
        writer.writerow(
            [post.id, post.title, post.category, post.status, _isoformat(post.created_at), post.views, post.likes]
        )
    return buffer.getvalue()


def _cdata(text: str) -> str:
    # split any "]]>" across two sections
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def posts_to_xml(posts: Sequence[Post]) -> str:
    """Render posts as a ``<blog>`` XML document."""
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', "<blog>"]
    for post in posts:
        published = post.published_at or post.created_at
        lines.extend(
            [
                "  <post>",
                f"    <id>{post.id}</id>",
                f"    <title>{escape(post.title)}</title>",
                f"    <content>{_cdata(post.content)}</content>",
                f"    <category>{escape(post.category)}</category>",
                f"    <published>{_isoformat(published)}</published>",
                f"    <status>{escape(post.status)}</status>",
                "  </post>",
            ]
        )
    lines.append("</blog>")
    return "\n".join(lines) + "\n"
