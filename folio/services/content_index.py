"""Query helpers over an in-memory set of posts.

Every function here is pure: inputs are never mutated and results are fresh
tuples (or dicts for ``pick``). ``ContentIndex`` owns one chronologically
sorted snapshot and is safe to share between readers.
"""

from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from folio.schemas.blog import Post
from folio.utils import parse_date

RELATED_LIMIT = 3


def sort_by_date(posts: Iterable[Post]) -> Tuple[Post, ...]:
    """Most recent first; posts sharing a date keep their input order."""
    return tuple(
        sorted(posts, key=lambda post: parse_date(post.publishedAt), reverse=True)
    )


def latest(posts: Iterable[Post], n: int) -> Tuple[Post, ...]:
    return sort_by_date(posts)[: max(n, 0)]


def filter_posts(posts: Iterable[Post], query: str) -> Tuple[Post, ...]:
    """Case-insensitive substring match on title, summary and tags."""
    needle = (query or "").lower()
    return tuple(post for post in posts if needle in _search_text(post))


def related_posts(
    post: Post, posts: Iterable[Post], limit: int = RELATED_LIMIT
) -> Tuple[Post, ...]:
    """Other posts sharing at least one tag with ``post``, in input order."""
    tags = set(post.tags or [])
    if not tags or limit <= 0:
        return ()

    related = []
    for candidate in posts:
        if candidate.slug == post.slug:
            continue
        if tags.intersection(candidate.tags or []):
            related.append(candidate)
            if len(related) == limit:
                break
    return tuple(related)


def pick(record: Any, fields: Sequence[str]) -> Dict[str, Any]:
    """Copy only ``fields`` from a model or mapping; absent fields are omitted."""
    source = record if isinstance(record, dict) else record.model_dump()
    return {field: source[field] for field in fields if field in source}


def _search_text(post: Post) -> str:
    return f"{post.title} {post.summary} {' '.join(post.tags or [])}".lower()


class ContentIndex:
    def __init__(self, posts: Iterable[Post]):
        self._posts = sort_by_date(posts)
        self._by_slug = {post.slug: post for post in self._posts}

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self):
        return iter(self._posts)

    @property
    def posts(self) -> Tuple[Post, ...]:
        return self._posts

    def slugs(self) -> Tuple[str, ...]:
        return tuple(post.slug for post in self._posts)

    def get(self, slug: str) -> Optional[Post]:
        return self._by_slug.get(slug)

    def latest(self, n: int) -> Tuple[Post, ...]:
        return self._posts[: max(n, 0)]

    def search(self, query: str) -> Tuple[Post, ...]:
        return filter_posts(self._posts, query)

    def related(self, post: Post, limit: int = RELATED_LIMIT) -> Tuple[Post, ...]:
        return related_posts(post, self._posts, limit)
