import pytest

from folio.schemas.blog import Project
from folio.services.content_index import ContentIndex
from folio.services.page_props import (
    blog_index_props,
    home_props,
    newsletter_props,
    post_props,
    static_paths,
)
from tests.conftest import make_post


@pytest.fixture
def index():
    return ContentIndex(
        [
            make_post("p1", "2024-01-01", tags=["ai"], body="long body"),
            make_post("p2", "2024-02-01", tags=["ai", "cpp"]),
            make_post("p3", "2024-03-01", tags=["cpp"]),
            make_post("p4", "2024-04-01"),
            make_post("p5", "2024-05-01", tags=["ai"], title="Transformers"),
        ]
    )


def test_home_props_latest_four_and_projects(index):
    projects = [Project(slug="tracklib", title="Tracklib", time="2023", url="x")]

    props = home_props(index, projects)

    assert [p["slug"] for p in props["posts"]] == ["p5", "p4", "p3", "p2"]
    assert set(props["posts"][0]) == {"slug", "title", "publishedAt", "image"}
    assert props["projects"] == [
        {"slug": "tracklib", "title": "Tracklib", "description": None, "time": "2023"}
    ]


def test_blog_index_props_lists_and_filters(index):
    everything = blog_index_props(index)
    filtered = blog_index_props(index, "transformers")

    assert [p["slug"] for p in everything["posts"]] == ["p5", "p4", "p3", "p2", "p1"]
    assert "body" not in everything["posts"][0]
    assert [p["slug"] for p in filtered["posts"]] == ["p5"]
    assert everything["seo"]["title"] == "Blog | Anurag"


def test_post_props_includes_related_and_seo(index):
    props = post_props(index, "p1")

    assert props["post"]["slug"] == "p1"
    assert props["post"]["body"] == "long body"
    assert [p["slug"] for p in props["related"]] == ["p5", "p2"]
    assert set(props["related"][0]) == {
        "slug",
        "title",
        "summary",
        "publishedAt",
        "image",
    }
    assert props["seo"]["canonical"].endswith("/blog/p1")


def test_post_props_unknown_slug(index):
    assert post_props(index, "nope") is None


def test_static_paths_cover_every_post(index):
    paths = static_paths(index)

    assert {p["params"]["slug"] for p in paths} == {"p1", "p2", "p3", "p4", "p5"}


def test_newsletter_props():
    props = newsletter_props(confirmed=True)

    assert props["confirmed"] is True
    assert props["seo"]["title"] == "Newsletter | Anurag Anand"
    assert props["seo"]["canonical"].endswith("/newsletter/")
