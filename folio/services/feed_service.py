"""RSS 2.0 feed generation from the blog content directory."""

import datetime
import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from email.utils import format_datetime
from pathlib import Path
from typing import List, Optional, Tuple
from xml.etree.ElementTree import (
    Element,
    SubElement,
    indent,
    register_namespace,
    tostring,
)

from folio.schemas.blog import FeedItem
from folio.services.content_parser import ContentParser
from folio.services.posts_service import FrontMatterError, parse_post_data
from folio.settings import settings
from folio.utils import parse_date, strip_xml_illegal

logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
GENERATOR = "folio"


class FeedGenerator:
    def __init__(
        self,
        repo,
        output_path,
        *,
        parser=None,
        site_url: Optional[str] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
        max_workers: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        self.repo = repo
        self.output_path = Path(output_path)
        self.parser = parser or ContentParser()
        self.site_url = (site_url or settings.site_url).rstrip("/")
        self.title = title or settings.SITE_TITLE
        self.description = description or settings.SITE_DESCRIPTION
        self.max_workers = max_workers or settings.FEED_MAX_WORKERS
        self.strict = settings.STRICT_FRONT_MATTER if strict is None else strict

    @property
    def feed_url(self) -> str:
        return f"{self.site_url}/feed.xml"

    def item_url(self, slug: str) -> str:
        return f"{self.site_url}/blog/{slug}"

    def collect_items(self) -> List[FeedItem]:
        """Read every content file and build one item per valid file.

        Items come back newest first (slug breaks ties) so the output does not
        depend on directory listing or thread completion order.
        """
        paths = self.repo.list_files()
        if not paths:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            results = list(pool.map(self._read_item, paths))

        # results follow the sorted path order, so the first file claims a slug
        by_slug = {}
        for entry in results:
            if entry is None:
                continue
            path, slug, item = entry
            if slug in by_slug:
                error = FrontMatterError(path, f"duplicate slug '{slug}'")
                if self.strict:
                    raise error
                logger.warning(f"Skipping feed item {error.path}: {error.reason}")
                continue
            by_slug[slug] = item

        entries = sorted(by_slug.items(), key=lambda e: e[0])
        entries.sort(key=lambda e: parse_date(e[1].date), reverse=True)
        return [item for _slug, item in entries]

    def build_xml(
        self, items: List[FeedItem], build_date: Optional[datetime.datetime] = None
    ) -> str:
        register_namespace("atom", ATOM_NS)
        build_date = build_date or datetime.datetime.now(datetime.timezone.utc)

        rss = Element("rss", attrib={"version": "2.0"})
        channel = SubElement(rss, "channel")
        SubElement(channel, "title").text = strip_xml_illegal(self.title)
        SubElement(channel, "description").text = strip_xml_illegal(
            self.description
        )
        SubElement(channel, "link").text = self.site_url
        SubElement(channel, "generator").text = GENERATOR
        SubElement(channel, "lastBuildDate").text = format_datetime(build_date)
        SubElement(
            channel,
            f"{{{ATOM_NS}}}link",
            attrib={
                "href": self.feed_url,
                "rel": "self",
                "type": "application/rss+xml",
            },
        )

        for item in items:
            item_el = SubElement(channel, "item")
            SubElement(item_el, "title").text = item.title
            SubElement(item_el, "link").text = item.url
            SubElement(item_el, "guid", attrib={"isPermaLink": "true"}).text = item.url
            SubElement(item_el, "pubDate").text = format_datetime(
                parse_date(item.date)
            )
            SubElement(item_el, "description").text = item.description

        indent(rss, space="    ")
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + tostring(
            rss, encoding="unicode"
        )

    def generate(self, build_date: Optional[datetime.datetime] = None) -> Path:
        """Regenerate the feed file in full and return its path."""
        items = self.collect_items()
        xml = self.build_xml(items, build_date=build_date)
        write_atomic(self.output_path, xml)
        logger.info(f"Wrote {len(items)} feed items to {self.output_path}")
        return self.output_path

    def _read_item(self, path: Path) -> Optional[Tuple[Path, str, FeedItem]]:
        try:
            data = parse_post_data(path, parser=self.parser, include_content=False)
        except FrontMatterError as e:
            if self.strict:
                raise
            logger.warning(f"Skipping feed item {e.path}: {e.reason}")
            return None

        item = FeedItem(
            title=data["title"],
            url=self.item_url(data["slug"]),
            date=data["publishedAt"],
            description=data["summary"],
        )
        return path, data["slug"], item


def write_atomic(path: Path, text: str) -> None:
    """Write ``text`` to a sibling temp file, then move it over ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
