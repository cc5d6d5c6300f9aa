import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from mdblog import dependencies as deps
from mdblog.exceptions import PostNotFoundError
from mdblog.services.page_renderer import PageRenderer

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def home(renderer: PageRenderer = Depends(deps.get_page_renderer)):
    return _render(renderer.home, "home page")


@router.get("/blog/")
def blog_index(renderer: PageRenderer = Depends(deps.get_page_renderer)):
    return _render(renderer.blog_index, "blog index")


@router.get("/blog/{slug}/")
def blog_post(slug: str, renderer: PageRenderer = Depends(deps.get_page_renderer)):
    try:
        return HTMLResponse(renderer.post(slug))
    except PostNotFoundError:
        return HTMLResponse(renderer.not_found(slug), status_code=404)
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")


@router.get("/recentpost/")
def recent_posts(renderer: PageRenderer = Depends(deps.get_page_renderer)):
    return _render(renderer.recent_posts_page, "recent posts")


def _render(render, page_name: str) -> HTMLResponse:
    try:
        return HTMLResponse(render())
    except Exception as e:
        logger.error(f"Unexpected error rendering {page_name}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to render {page_name}")
