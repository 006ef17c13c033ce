import logging
from pathlib import Path

import frontmatter

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def get_markdown_content(self, path: Path) -> str:
        """Get the full markdown content of a file (decoded as text)."""
        raw = self._get_raw_content(path)
        if raw.startswith(b"\xef\xbb\xbf"):
            raw = raw[3:]
        return raw.decode(self.encoding, errors="ignore")

    def get_front_matter(self, path: Path) -> frontmatter.Post:
        """Split a file into its front matter metadata and body."""
        return frontmatter.loads(self.get_markdown_content(path))

    def _get_raw_content(self, path: Path) -> bytes:
        return Path(path).read_bytes()
