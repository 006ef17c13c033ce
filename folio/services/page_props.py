"""Data handed to the page renderer, one function per page."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from folio.schemas.blog import Project
from folio.services.content_index import ContentIndex, pick
from folio.services.seo_service import page_seo, post_seo

logger = logging.getLogger(__name__)

HOME_POST_COUNT = 4
HOME_POST_FIELDS = ["slug", "title", "publishedAt", "image"]
LIST_POST_FIELDS = ["slug", "title", "summary", "publishedAt", "image"]
PROJECT_FIELDS = ["slug", "title", "description", "time"]

BLOG_TITLE = "Blog | Anurag"
BLOG_DESCRIPTION = (
    "I write about deep level technical stuff, mostly in software engineering "
    "and applied AI"
)
NEWSLETTER_TITLE = "Newsletter | Anurag Anand"
NEWSLETTER_DESCRIPTION = (
    "A newsletter in the realm of software engineering. I write about deep "
    "level tech stuff and some in applied AI."
)


def home_props(
    index: ContentIndex, projects: Iterable[Project] = ()
) -> Dict[str, Any]:
    return {
        "posts": [pick(p, HOME_POST_FIELDS) for p in index.latest(HOME_POST_COUNT)],
        "projects": [pick(p, PROJECT_FIELDS) for p in projects],
    }


def blog_index_props(index: ContentIndex, query: str = "") -> Dict[str, Any]:
    return {
        "posts": [pick(p, LIST_POST_FIELDS) for p in index.search(query)],
        "seo": page_seo(BLOG_TITLE, BLOG_DESCRIPTION, "/blog").model_dump(
            exclude_none=True
        ),
    }


def post_props(index: ContentIndex, slug: str) -> Optional[Dict[str, Any]]:
    post = index.get(slug)
    if post is None:
        logger.warning(f"No post found for slug {slug}")
        return None
    return {
        "post": post.model_dump(),
        "related": [pick(p, LIST_POST_FIELDS) for p in index.related(post)],
        "seo": post_seo(post).model_dump(exclude_none=True),
    }


def newsletter_props(confirmed: bool = False) -> Dict[str, Any]:
    return {
        "confirmed": confirmed,
        "seo": page_seo(
            NEWSLETTER_TITLE, NEWSLETTER_DESCRIPTION, "/newsletter"
        ).model_dump(exclude_none=True),
    }


def static_paths(index: ContentIndex) -> List[Dict[str, Dict[str, str]]]:
    return [{"params": {"slug": slug}} for slug in index.slugs()]
