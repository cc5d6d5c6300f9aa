import logging
from typing import List, Optional

from mdblog.exceptions import BlogError
from mdblog.schemas.blog import LoadFailure, PostCollection, PostDetail
from mdblog.services.content_parser import ContentParser, coerce_text, normalize_tags
from mdblog.services.listing import most_recent, sort_posts_by_date
from mdblog.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        repo,
        parser: Optional[ContentParser] = None,
        settings: Optional[Settings] = None,
    ):
        self.repo = repo
        self.settings = settings or default_settings
        self.parser = parser or ContentParser(
            extensions=self.settings.MARKDOWN_EXTENSIONS,
            html_policy=self.settings.HTML_POLICY,
        )

    def list_slugs(self) -> List[str]:
        return self.repo.list_slugs()

    def load_post(self, slug: str) -> PostDetail:
        """Load a single post. Raises PostNotFoundError if there is no file."""
        slug = slug.lower()
        raw = self.repo.read_post(slug)
        post_data = parse_post_data(raw, slug, parser=self.parser, settings=self.settings)
        return PostDetail(**post_data)

    def collect_posts(self) -> PostCollection:
        """Load every post, keeping failures aside instead of aborting."""
        collection = PostCollection()
        for slug in self.repo.list_slugs():
            try:
                collection.posts.append(self.load_post(slug))
            except BlogError as e:
                logger.warning(f"Skipping post {slug}: {e}")
                collection.failures.append(LoadFailure(slug=slug, error=str(e)))
            except Exception as e:
                logger.error(f"Unexpected error loading post {slug}: {e}")
                collection.failures.append(LoadFailure(slug=slug, error=str(e)))
        return collection

    def load_all_posts(self) -> List[PostDetail]:
        return self.collect_posts().posts

    def list_posts(self) -> List[PostDetail]:
        return sort_posts_by_date(self.load_all_posts(), self.settings.DATE_FORMATS)

    def recent_posts(self, limit: Optional[int] = None) -> List[PostDetail]:
        if limit is None:
            limit = self.settings.RECENT_POSTS_LIMIT
        return most_recent(self.load_all_posts(), limit, self.settings.DATE_FORMATS)


def parse_post_data(raw: str, slug: str, *, parser: ContentParser, settings: Settings) -> dict:
    """Parse front matter and body into standardized post data."""
    metadata, body = parser.split(raw, slug)

    return {
        "slug": slug,
        "title": coerce_text(metadata.get("title"), settings.DEFAULT_TITLE, "title", slug),
        "date": coerce_text(metadata.get("date"), settings.DEFAULT_DATE, "date", slug),
        "excerpt": coerce_text(
            metadata.get("excerpt"), settings.DEFAULT_EXCERPT, "excerpt", slug
        ),
        "author": coerce_text(metadata.get("author"), settings.SITE_AUTHOR, "author", slug),
        "tags": normalize_tags(metadata.get("tags")),
        "content": parser.render_markdown(body),
    }
