import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import ValidationError

from folio.schemas.blog import Project
from folio.services.content_parser import ContentParser
from folio.services.posts_service import FrontMatterError

logger = logging.getLogger(__name__)


class ProjectsService:
    def __init__(self, repo, parser=None):
        self.repo = repo
        self.parser = parser or ContentParser()

    def list_projects(self) -> Tuple[Project, ...]:
        projects: List[Project] = []
        for path in self.repo.list_files():
            try:
                data = parse_project_data(path, parser=self.parser)
                projects.append(Project(**data))
            except FrontMatterError as e:
                logger.warning(f"Skipping project {e.path}: {e.reason}")
            except ValidationError as e:
                logger.warning(f"Skipping project {path}: invalid values ({e})")
        return tuple(projects)


def parse_project_data(path: Path, *, parser) -> dict:
    path = Path(path)
    try:
        metadata = parser.get_front_matter(path).metadata or {}
    except (yaml.YAMLError, ValueError) as e:
        # ValueError covers the JSON and TOML front matter handlers
        raise FrontMatterError(path, f"invalid front matter ({e})") from e

    if not metadata.get("title"):
        raise FrontMatterError(path, "missing title")

    return {
        "slug": path.stem,
        "title": str(metadata["title"]),
        "description": _optional_str(metadata.get("description")),
        "time": _optional_str(metadata.get("time")),
        "url": metadata.get("url"),
        "image": metadata.get("image"),
    }


def _optional_str(value) -> Optional[str]:
    return None if value is None else str(value)
