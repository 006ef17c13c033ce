from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "data/blog"
    PROJECTS_DIR: str = "data/projects"
    CONTENT_EXTENSIONS: List[str] = [".md", ".mdx"]

    # Site
    SITE_URL: str = "https://anuraganand.vercel.app"
    SITE_TITLE: str = "Anurag Anand"
    SITE_DESCRIPTION: str = "Software Engineer and UG at IIT Kharagpur"
    SITE_LOCALE: str = "en_US"
    TWITTER_HANDLE: str = "@samuelkraft"

    # Feed
    FEED_PATH: str = "public/feed.xml"
    FEED_MAX_WORKERS: int = 8
    STRICT_FRONT_MATTER: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def site_url(self) -> str:
        return self.SITE_URL.rstrip("/")

    @property
    def blog_url(self) -> str:
        return f"{self.site_url}/blog"

    @property
    def feed_url(self) -> str:
        return f"{self.site_url}/feed.xml"

    @property
    def default_og_image(self) -> str:
        return f"{self.site_url}/og.jpg"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
