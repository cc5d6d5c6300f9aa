import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from mdblog import dependencies as deps
from mdblog.exceptions import PostNotFoundError
from mdblog.schemas.blog import PostDetail, PostSummary, StaticParams
from mdblog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return [
            PostSummary(**post.model_dump(exclude={"content"}))
            for post in service.list_posts()
        ]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        return service.load_post(slug)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/static-params", response_model=List[StaticParams])
def static_params(builder=Depends(deps.get_site_builder)):
    """Slugs the static build pre-renders."""
    return builder.generate_static_params()
