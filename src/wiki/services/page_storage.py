"""Flat-file storage backend for wiki pages."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)

TITLE_PATTERN = r"[a-zA-Z0-9]+"
PAGE_SUFFIX = ".txt"
PAGE_FILE_MODE = 0o600

_title_re = re.compile(TITLE_PATTERN)


class InvalidTitleError(ValueError):
    """Raised when a page title contains invalid characters."""

    pass


class PageNotFoundError(LookupError):
    """Raised when no file exists for a page title."""

    pass


def validate_title(title: str) -> str:
    """Validate a page title.

    Titles double as filenames, so only ASCII letters and digits are allowed.
    Raises InvalidTitleError otherwise.
    """
    if not title:
        raise InvalidTitleError("Title cannot be empty")

    if not _title_re.fullmatch(title):
        raise InvalidTitleError(f"Invalid page title: {title!r}")

    return title


@dataclass
class Page:
    """Represents a wiki page."""

    title: str
    body: bytes = b""
    last_modified: datetime | None = None

    @property
    def text(self) -> str:
        """Return the body decoded for display."""
        return self.body.decode("utf-8", errors="replace")


class PageStorageService:
    """Service for reading/writing wiki pages as flat files."""

    def __init__(self, pages_path: Path | None = None):
        self.pages_path = Path(pages_path or settings.WIKI_PAGES_PATH)

    def ensure_pages_dir(self) -> Path:
        """Ensure the pages directory exists."""
        self.pages_path.mkdir(parents=True, exist_ok=True)
        return self.pages_path

    def page_file(self, title: str) -> Path:
        title = validate_title(title)
        return self.pages_path / f"{title}{PAGE_SUFFIX}"

    def exists(self, title: str) -> bool:
        return self.page_file(title).is_file()

    def load(self, title: str) -> Page:
        """Read a page from disk.

        Raises PageNotFoundError if there is no file for the title.
        """
        file_path = self.page_file(title)
        try:
            body = file_path.read_bytes()
        except FileNotFoundError as e:
            raise PageNotFoundError(f"Page not found: {title}") from e

        last_modified = datetime.fromtimestamp(file_path.stat().st_mtime)
        logger.debug("Loaded page %s (%d bytes)", title, len(body))
        return Page(title=title, body=body, last_modified=last_modified)

    def save(self, page: Page) -> Page:
        """Write a page to disk, replacing any previous content."""
        file_path = self.page_file(page.title)
        # Restrict the mode before any content reaches the file
        file_path.touch(mode=PAGE_FILE_MODE, exist_ok=True)
        file_path.chmod(PAGE_FILE_MODE)
        file_path.write_bytes(page.body)

        logger.info("Saved page %s (%d bytes)", page.title, len(page.body))
        return Page(title=page.title, body=page.body, last_modified=datetime.now())

    def list_pages(self) -> list[str]:
        """List all page titles in the pages directory."""
        if not self.pages_path.exists():
            return []

        titles = []
        for file_path in self.pages_path.glob(f"*{PAGE_SUFFIX}"):
            if file_path.is_file() and _title_re.fullmatch(file_path.stem):
                titles.append(file_path.stem)
        return sorted(titles)


# Singleton instance
_storage_service: PageStorageService | None = None


def get_storage_service() -> PageStorageService:
    """Get the page storage service singleton."""
    global _storage_service
    if _storage_service is None:
        _storage_service = PageStorageService()
        _storage_service.ensure_pages_dir()
    return _storage_service


def reset_storage_service() -> None:
    """Drop the singleton so the next call rebuilds it from settings."""
    global _storage_service
    _storage_service = None
