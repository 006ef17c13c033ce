from folio.repos.content_repo import FileContentRepo
from folio.services.content_index import ContentIndex
from folio.services.feed_service import FeedGenerator
from folio.services.posts_service import PostsService
from folio.services.projects_service import ProjectsService
from folio.settings import settings


def get_posts_repo(config=settings):
    return FileContentRepo(config.CONTENT_DIR, config.CONTENT_EXTENSIONS)


def get_projects_repo(config=settings):
    return FileContentRepo(config.PROJECTS_DIR, config.CONTENT_EXTENSIONS)


def get_posts_service(repo=None, config=settings):
    return PostsService(
        repo=repo or get_posts_repo(config), strict=config.STRICT_FRONT_MATTER
    )


def get_projects_service(repo=None, config=settings):
    return ProjectsService(repo=repo or get_projects_repo(config))


def get_content_index(service=None, config=settings):
    service = service or get_posts_service(config=config)
    return ContentIndex(service.list_posts())


def get_feed_generator(repo=None, config=settings):
    return FeedGenerator(
        repo=repo or get_posts_repo(config),
        output_path=config.FEED_PATH,
        site_url=config.site_url,
        title=config.SITE_TITLE,
        description=config.SITE_DESCRIPTION,
        max_workers=config.FEED_MAX_WORKERS,
        strict=config.STRICT_FRONT_MATTER,
    )
