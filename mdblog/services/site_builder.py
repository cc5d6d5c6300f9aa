import logging
from pathlib import Path
from typing import Callable, List, Optional

from mdblog.schemas.blog import BuildReport, LoadFailure
from mdblog.services.listing import sort_posts_by_date

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Writes every page of the site to an output directory.

    Posts are loaded once per build and shared by every page.
    """

    def __init__(self, repo, renderer, settings):
        self.repo = repo
        self.renderer = renderer
        self.settings = settings

    def generate_static_params(self) -> List[dict]:
        return [{"slug": slug} for slug in self.repo.list_slugs()]

    def build(self, output_dir: Optional[Path] = None) -> BuildReport:
        output_dir = Path(output_dir) if output_dir else self.settings.output_path
        output_dir.mkdir(parents=True, exist_ok=True)
        report = BuildReport(output_dir=str(output_dir))

        collection = self.renderer.posts_service.collect_posts()
        posts = sort_posts_by_date(collection.posts, self.settings.DATE_FORMATS)

        self._write_page(report, "index.html", lambda: self.renderer.home(posts))
        self._write_page(report, "blog/index.html", lambda: self.renderer.blog_index(posts))
        self._write_page(
            report, "recentpost/index.html", lambda: self.renderer.recent_posts_page(posts)
        )
        self._write_page(report, "404.html", lambda: self.renderer.not_found(posts=posts))

        # slugs that failed to load were already logged by collect_posts
        report.failures.extend(collection.failures)
        for post in posts:
            self._write_page(
                report,
                f"blog/{post.slug}/index.html",
                lambda post=post: self.renderer.post_page(post, posts),
                slug=post.slug,
            )

        logger.info(
            f"Built {len(report.pages)} pages into {output_dir} "
            f"({len(report.failures)} failed)"
        )
        return report

    def _write_page(
        self,
        report: BuildReport,
        relative_path: str,
        render: Callable[[], str],
        slug: str = "",
    ) -> None:
        try:
            page = render()
        except Exception as e:
            logger.error(f"Failed to render {relative_path}: {e}")
            report.failures.append(LoadFailure(slug=slug or relative_path, error=str(e)))
            return

        target = Path(report.output_dir) / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(page, encoding="utf-8")
        report.pages.append(relative_path)
