import logging
from pathlib import Path
from typing import Dict, List

from mdblog.exceptions import ContentDirectoryUnavailable, PostNotFoundError

logger = logging.getLogger(__name__)


class FilesystemPostsRepo:
    def __init__(self, content_dir, extension: str = ".md"):
        self.content_dir = Path(content_dir)
        self.extension = extension

    def list_slugs(self) -> List[str]:
        try:
            files = self._content_files()
        except ContentDirectoryUnavailable as e:
            logger.warning(f"{e}; no posts will be listed")
            return []
        return sorted(files)

    def read_post(self, slug: str) -> str:
        path = self._resolve(slug)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise PostNotFoundError(slug)

    def _resolve(self, slug: str) -> Path:
        if not slug or slug in (".", "..") or "/" in slug or "\\" in slug:
            raise PostNotFoundError(slug)

        # same scan as list_slugs so a case collision resolves to one file
        try:
            files = self._content_files()
        except ContentDirectoryUnavailable:
            raise PostNotFoundError(slug)

        path = files.get(slug.lower())
        if path is None:
            raise PostNotFoundError(slug)
        return path

    def _content_files(self) -> Dict[str, Path]:
        """Map slug -> file for every content file in the directory."""
        try:
            entries = sorted(self.content_dir.iterdir())
        except OSError as e:
            raise ContentDirectoryUnavailable(self.content_dir, e.strerror or str(e))

        files: Dict[str, Path] = {}
        suffix = self.extension.lower()
        for entry in entries:
            if not entry.name.lower().endswith(suffix) or not entry.is_file():
                continue
            slug = entry.name[: -len(suffix)].lower()
            if not slug:
                continue
            if slug in files:
                logger.warning(
                    f"Duplicate slug {slug}: keeping {files[slug].name}, ignoring {entry.name}"
                )
                continue
            files[slug] = entry
        return files
