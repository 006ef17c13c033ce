from typing import Optional

from folio.schemas.blog import Post
from folio.schemas.seo import OpenGraph, OpenGraphImage, SeoMeta, Twitter
from folio.settings import settings


def default_seo(config=None) -> SeoMeta:
    """Site-wide defaults applied to every page."""
    config = config or settings
    return SeoMeta(
        title=config.SITE_TITLE,
        description=config.SITE_DESCRIPTION,
        openGraph=OpenGraph(
            type="website",
            locale=config.SITE_LOCALE,
            url=config.site_url,
            site_name=config.SITE_TITLE,
            images=[
                OpenGraphImage(url=config.default_og_image, alt=config.SITE_TITLE)
            ],
        ),
        twitter=Twitter(handle=config.TWITTER_HANDLE, site=config.TWITTER_HANDLE),
    )


def page_seo(title: str, description: str, path: str = "/", config=None) -> SeoMeta:
    config = config or settings
    segment = path.strip("/")
    url = f"{config.site_url}/{segment}/" if segment else config.site_url
    return SeoMeta(
        title=title,
        description=description,
        canonical=url,
        openGraph=OpenGraph(
            title=title,
            description=description,
            url=url,
            site_name=config.SITE_TITLE,
        ),
        twitter=Twitter(),
    )


def post_seo(post: Post, config=None) -> SeoMeta:
    config = config or settings
    url = f"{config.blog_url}/{post.slug}"
    image: Optional[str] = post.og or post.image or config.default_og_image
    return SeoMeta(
        title=f"{post.title} | {config.SITE_TITLE}",
        description=post.summary,
        canonical=url,
        openGraph=OpenGraph(
            title=post.title,
            description=post.summary,
            url=url,
            images=[OpenGraphImage(url=image, alt=post.title)],
        ),
    )
