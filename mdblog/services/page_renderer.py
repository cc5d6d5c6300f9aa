import datetime
import logging
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from mdblog.schemas.blog import PostDetail
from mdblog.services.listing import most_recent, sort_posts_by_date

logger = logging.getLogger(__name__)


class PageRenderer:
    """Renders site pages from posts through the Jinja2 templates.

    Every page method accepts an already loaded ``posts`` list. When it is
    omitted the posts are loaded from the service once for that page.
    """

    def __init__(self, posts_service, settings, env: Optional[Environment] = None):
        self.posts_service = posts_service
        self.settings = settings
        self.env = env or Environment(
            loader=FileSystemLoader(str(settings.templates_path)),
            autoescape=select_autoescape(["html"]),
        )

    def home(self, posts: Optional[List[PostDetail]] = None) -> str:
        return self._render("home.html", posts)

    def blog_index(self, posts: Optional[List[PostDetail]] = None) -> str:
        if posts is None:
            posts = self.posts_service.load_all_posts()
        posts = sort_posts_by_date(posts, self.settings.DATE_FORMATS)
        return self._render("blog_index.html", posts, posts=posts)

    def post(self, slug: str, posts: Optional[List[PostDetail]] = None) -> str:
        # PostNotFoundError propagates; callers decide how to show it
        return self.post_page(self.posts_service.load_post(slug), posts)

    def post_page(self, post: PostDetail, posts: Optional[List[PostDetail]] = None) -> str:
        return self._render("post.html", posts, post=post)

    def recent_posts_page(self, posts: Optional[List[PostDetail]] = None) -> str:
        return self._render("recent_posts.html", posts)

    def not_found(
        self, slug: Optional[str] = None, posts: Optional[List[PostDetail]] = None
    ) -> str:
        return self._render("not_found.html", posts, slug=slug)

    def _render(
        self, template_name: str, all_posts: Optional[List[PostDetail]] = None, **context
    ) -> str:
        template = self.env.get_template(template_name)
        return template.render(
            site=self._site_context(),
            recent_posts=self._recent_posts(all_posts),
            year=datetime.date.today().year,
            **context,
        )

    def _recent_posts(self, posts: Optional[List[PostDetail]]) -> List[PostDetail]:
        try:
            if posts is None:
                posts = self.posts_service.load_all_posts()
            return most_recent(
                posts, self.settings.RECENT_POSTS_LIMIT, self.settings.DATE_FORMATS
            )
        except Exception as e:
            logger.error(f"Failed to build recent posts: {e}")
            return []

    def _site_context(self) -> dict:
        return {
            "title": self.settings.SITE_TITLE,
            "description": self.settings.SITE_DESCRIPTION,
            "intro": self.settings.SITE_INTRO,
            "author": self.settings.SITE_AUTHOR,
            "github_url": self.settings.GITHUB_URL,
            "linkedin_url": self.settings.LINKEDIN_URL,
        }
