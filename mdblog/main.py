import logging

from fastapi import FastAPI

from mdblog.routers import pages, posts
from mdblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.SITE_TITLE, description="Markdown blog preview")

app.include_router(pages.router)
app.include_router(posts.router)


@app.get("/health")
async def health():
    return {"message": "mdblog preview is running"}
