import datetime
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import ValidationError

from folio.schemas.blog import Post
from folio.services.content_parser import ContentParser
from folio.utils import calculate_reading_time, parse_date

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "publishedAt", "summary")


class FrontMatterError(ValueError):
    def __init__(self, path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path.name}: {reason}")


class PostsService:
    def __init__(self, repo, parser=None, strict: bool = False):
        self.repo = repo
        self.parser = parser or ContentParser()
        self.strict = strict

    def list_posts(self) -> Tuple[Post, ...]:
        """Load every post in the content directory.

        Files with malformed front matter are skipped with a warning, or abort
        the whole load when ``strict`` is set.
        """
        posts: List[Post] = []
        seen = set()
        for path in self.repo.list_files():
            post = self._load(path)
            if post is None:
                continue
            if post.slug in seen:
                # foo.md and foo.mdx would collide on the same URL
                self._reject(FrontMatterError(path, f"duplicate slug '{post.slug}'"))
                continue
            seen.add(post.slug)
            posts.append(post)
        return tuple(posts)

    def get_post(self, slug: str) -> Optional[Post]:
        path = self.repo.get_file(slug)
        if not path:
            return None
        return self._load(path)

    def _load(self, path: Path) -> Optional[Post]:
        try:
            return Post(**parse_post_data(path, parser=self.parser))
        except FrontMatterError as e:
            self._reject(e)
        except ValidationError as e:
            self._reject(FrontMatterError(path, f"invalid field values ({e})"))
        return None

    def _reject(self, error: FrontMatterError) -> None:
        if self.strict:
            raise error
        logger.warning(f"Skipping post {error.path}: {error.reason}")


def parse_post_data(
    path: Path, *, parser, include_content: bool = True
) -> dict:
    """Parse frontmatter and return standardized post data"""
    path = Path(path)
    try:
        parsed = parser.get_front_matter(path)
    except (yaml.YAMLError, ValueError) as e:
        # ValueError covers the JSON and TOML front matter handlers
        raise FrontMatterError(path, f"invalid front matter ({e})") from e

    metadata = parsed.metadata or {}
    missing = [field for field in REQUIRED_FIELDS if not metadata.get(field)]
    if missing:
        raise FrontMatterError(path, f"missing {', '.join(missing)}")

    published_at = _convert_date(metadata["publishedAt"])
    updated_at = _convert_date(metadata.get("updatedAt"))
    for name, value in (("publishedAt", published_at), ("updatedAt", updated_at)):
        if value is not None and not _is_valid_date(value):
            raise FrontMatterError(path, f"unparseable {name} '{value}'")

    post_data = {
        "slug": _normalize_slug(path.name),
        "title": str(metadata["title"]),
        "summary": str(metadata["summary"]),
        "publishedAt": published_at,
        "updatedAt": updated_at,
        "tags": _normalize_tags(metadata.get("tags")),
        "image": metadata.get("image"),
        "og": metadata.get("og"),
        "readingTime": calculate_reading_time(parsed.content),
    }

    if include_content:
        post_data["body"] = parsed.content

    return post_data


def _normalize_slug(filename: str) -> str:
    return Path(filename).stem


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def _convert_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)


def _is_valid_date(value: str) -> bool:
    try:
        parse_date(value)
    except ValueError:
        return False
    return True
