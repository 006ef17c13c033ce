import logging

from folio.repos.content_repo import FileContentRepo
from folio.services.projects_service import ProjectsService


def test_list_projects_reads_front_matter(tmp_path, caplog):
    (tmp_path / "tracklib.md").write_text(
        "---\ntitle: Tracklib\ndescription: Music sampling\ntime: 2021\n---\n", "utf-8"
    )
    (tmp_path / "untitled.md").write_text("---\ndescription: nope\n---\n", "utf-8")

    with caplog.at_level(logging.WARNING):
        projects = ProjectsService(FileContentRepo(tmp_path)).list_projects()

    assert len(projects) == 1
    project = projects[0]
    assert project.slug == "tracklib"
    assert project.title == "Tracklib"
    assert project.description == "Music sampling"
    assert project.time == "2021"
    assert "missing title" in caplog.text


def test_list_projects_empty(tmp_path):
    assert ProjectsService(FileContentRepo(tmp_path)).list_projects() == ()


def test_list_projects_skips_json_front_matter_errors(tmp_path, caplog):
    (tmp_path / "good.md").write_text("---\ntitle: Good\n---\n", "utf-8")
    (tmp_path / "weird.md").write_text('{\n"title": oops\n}\nbody', "utf-8")

    with caplog.at_level(logging.WARNING):
        projects = ProjectsService(FileContentRepo(tmp_path)).list_projects()

    assert [project.slug for project in projects] == ["good"]
    assert "invalid front matter" in caplog.text
