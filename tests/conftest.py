import textwrap

import pytest

from mdblog.exceptions import PostNotFoundError
from mdblog.settings import Settings


def make_settings(**overrides) -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None, **overrides)


class FakeRepo:
    """
    Minimal in-memory posts repo stand-in used in service tests.
    """

    def __init__(self, posts: dict[str, str]):
        self.posts = {slug: textwrap.dedent(raw).lstrip() for slug, raw in posts.items()}
        self.reads = []

    def list_slugs(self):
        return sorted(self.posts)

    def read_post(self, slug: str) -> str:
        self.reads.append(slug)
        if slug not in self.posts:
            raise PostNotFoundError(slug)
        return self.posts[slug]


class FakePostsService:
    """
    Minimal posts service stand-in for router and renderer tests.
    """

    def __init__(self, posts=None, load_post_return=None, load_post_error=None):
        self._posts = posts or []
        self._load_post_return = load_post_return
        self._load_post_error = load_post_error

    def list_posts(self):
        return self._posts

    def load_all_posts(self):
        return self._posts

    def load_post(self, slug: str):
        if self._load_post_error:
            raise self._load_post_error
        if self._load_post_return is None:
            raise PostNotFoundError(slug)
        return self._load_post_return


@pytest.fixture
def content_dir(tmp_path):
    path = tmp_path / "posts"
    path.mkdir()
    return path


@pytest.fixture
def write_post(content_dir):
    def _write(filename: str, text: str):
        path = content_dir / filename
        path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
        return path

    return _write
