from fastapi import Depends

from mdblog.repos.posts_repo import FilesystemPostsRepo
from mdblog.services.content_parser import ContentParser
from mdblog.services.page_renderer import PageRenderer
from mdblog.services.posts_service import PostsService
from mdblog.services.site_builder import SiteBuilder
from mdblog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(
        current_settings.content_path, extension=current_settings.CONTENT_EXTENSION
    )


def get_content_parser(current_settings: Settings = Depends(get_settings)):
    return ContentParser(
        extensions=current_settings.MARKDOWN_EXTENSIONS,
        html_policy=current_settings.HTML_POLICY,
    )


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, parser=parser, settings=current_settings)


def get_page_renderer(
    service=Depends(get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    return PageRenderer(service, current_settings)


def get_site_builder(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_page_renderer),
    current_settings: Settings = Depends(get_settings),
):
    return SiteBuilder(repo, renderer, current_settings)


def build_site_builder(current_settings: Settings) -> SiteBuilder:
    """Wire the build pipeline outside of a request."""
    repo = get_posts_repo(current_settings)
    parser = get_content_parser(current_settings)
    service = get_posts_service(repo=repo, parser=parser, current_settings=current_settings)
    renderer = get_page_renderer(service=service, current_settings=current_settings)
    return get_site_builder(repo=repo, renderer=renderer, current_settings=current_settings)
