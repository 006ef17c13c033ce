import logging

from folio import dependencies as deps
from folio.settings import settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(config=settings) -> int:
    """Regenerate the RSS feed; returns a process exit code."""
    configure_logging(config.LOG_LEVEL)
    generator = deps.get_feed_generator(config=config)
    try:
        path = generator.generate()
        logger.info(f"Feed generation completed successfully: {path}")
        return 0
    except Exception as e:
        logger.error(f"Feed generation failed: {e}", exc_info=True)
        return 1
