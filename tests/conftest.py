import textwrap
from pathlib import Path

import frontmatter
import pytest

from folio.schemas.blog import Post
from folio.settings import Settings


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, files):
        self.files = [Path(f) for f in files]

    def list_files(self):
        return list(self.files)

    def get_file(self, slug):
        for path in self.files:
            if path.stem == slug:
                return path
        return None


class FakeParser:
    """
    Minimal content parser stand-in keyed by file name.
    """

    def __init__(self, content_by_name: dict[str, str]):
        self.content_by_name = content_by_name
        self.calls = []

    def get_front_matter(self, path) -> frontmatter.Post:
        self.calls.append(Path(path).name)
        raw = self.content_by_name.get(Path(path).name, "")
        return frontmatter.loads(textwrap.dedent(raw).lstrip())


def make_post(slug: str, publishedAt: str = "2024-01-01", **fields) -> Post:
    data = {
        "slug": slug,
        "title": fields.pop("title", slug.replace("-", " ").title()),
        "summary": fields.pop("summary", f"Summary of {slug}"),
        "publishedAt": publishedAt,
    }
    data.update(fields)
    return Post(**data)


def post_source(
    title="Hello",
    publishedAt="2024-01-01",
    summary="First post",
    extra="",
    body="Body text.",
) -> str:
    lines = ["---"]
    if title is not None:
        lines.append(f'title: "{title}"')
    if publishedAt is not None:
        lines.append(f'publishedAt: "{publishedAt}"')
    if summary is not None:
        lines.append(f'summary: "{summary}"')
    if extra:
        lines.append(extra)
    lines += ["---", body, ""]
    return "\n".join(lines)


@pytest.fixture
def content_dir(tmp_path):
    path = tmp_path / "data" / "blog"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_post(content_dir):
    def _write(name: str, text: str | None = None, **fields) -> Path:
        path = content_dir / name
        path.write_text(text if text is not None else post_source(**fields), "utf-8")
        return path

    return _write


@pytest.fixture
def test_settings(tmp_path, content_dir):
    projects = tmp_path / "data" / "projects"
    projects.mkdir(parents=True)
    return Settings(
        CONTENT_DIR=str(content_dir),
        PROJECTS_DIR=str(projects),
        FEED_PATH=str(tmp_path / "public" / "feed.xml"),
        SITE_URL="https://example.com/",
        SITE_TITLE="Example",
        SITE_DESCRIPTION="Example site",
        FEED_MAX_WORKERS=2,
        LOG_LEVEL="DEBUG",
    )
