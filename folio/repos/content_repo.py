from pathlib import Path
from typing import Iterable, List, Optional

from folio.settings import settings


class FileContentRepo:
    """Content files stored flat in one directory (no recursion)."""

    def __init__(self, content_dir, extensions: Optional[Iterable[str]] = None):
        self.content_dir = Path(content_dir)
        self.extensions = tuple(
            ext.lower() for ext in (extensions or settings.CONTENT_EXTENSIONS)
        )

    def list_files(self) -> List[Path]:
        # iterdir() raises for a missing or unreadable directory
        return sorted(
            path for path in self.content_dir.iterdir() if self._is_valid(path)
        )

    def get_file(self, slug: str) -> Optional[Path]:
        if not slug or "/" in slug or "\\" in slug or slug.startswith("."):
            return None
        for ext in self.extensions:
            path = self.content_dir / f"{slug}{ext}"
            if self._is_valid(path):
                return path
        return None

    def _is_valid(self, path: Path) -> bool:
        return (
            path.is_file()
            and path.suffix.lower() in self.extensions
            and not path.name.startswith(".")
        )
