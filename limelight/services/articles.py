from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from flask import current_app

from ..errors import MalformedArticleError

logger = logging.getLogger(__name__)

POSTS_TABLE = "posts"
# title, excerpt, image and the joined author's name; nothing else is rendered
SELECT_COLUMNS = "title,excerpt,image_url,authors(full_name)"
# PostgREST answers 406 when object mode matches zero (or several) rows
NOT_FOUND_STATUSES = (404, 406)


@dataclass(frozen=True)
class ArticleMetadata:
    title: str = ""
    excerpt: str = ""
    image_url: str = ""
    author_full_name: str = ""

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ArticleMetadata":
        author = record.get("authors")
        if not isinstance(author, dict):
            raise MalformedArticleError(f"article record has no joined author: {author!r}")
        return cls(
            title=record.get("title") or "",
            excerpt=record.get("excerpt") or "",
            image_url=record.get("image_url") or "",
            author_full_name=author.get("full_name") or "",
        )


def fetch_article_metadata(slug: str) -> Optional[ArticleMetadata]:
    """Look up one article by slug.

    Returns None when the article is missing or the backend cannot answer;
    the two cases are logged differently but callers treat them the same.
    Raises MalformedArticleError when a record comes back without its author.
    """
    backend = current_app.extensions["supabase"]
    url = f"{backend['base_url']}/rest/v1/{POSTS_TABLE}"
    params = {"slug": f"eq.{slug}", "select": SELECT_COLUMNS}
    try:
        r = backend["session"].get(url, params=params, timeout=backend["timeout"])
    except requests.RequestException as e:
        logger.error("Backend unreachable while fetching article %r: %s", slug, e)
        return None

    if r.status_code in NOT_FOUND_STATUSES:
        logger.info("Article not found: %r", slug)
        return None
    if not r.ok:
        logger.error("Backend error for article %r: %s %s", slug, r.status_code, r.text)
        return None

    try:
        record = r.json()
    except ValueError:
        logger.warning("Backend returned a non-JSON body for article %r", slug)
        return None
    if not record or not isinstance(record, dict):
        logger.warning("Backend returned an empty or unexpected body for article %r", slug)
        return None

    return ArticleMetadata.from_record(record)
