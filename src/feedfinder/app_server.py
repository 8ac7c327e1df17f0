import logging
from typing import Dict, List

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from feedfinder import config
from feedfinder.errors import FetchError, MalformedUrlError
from feedfinder.fetcher import find_feeds
from feedfinder.finder import discover

logger = logging.getLogger(__name__)

app = FastAPI(
    title="FeedFinder API",
    description="Discover RSS/Atom/JSON feed URLs for a web page.",
    version="0.1.0",
    docs_url="/docs",        # Swagger UI
    redoc_url="/redoc",      # ReDoc UI
    openapi_url="/openapi.json",
)


class DiscoverRequest(BaseModel):
    base_url: str
    html: str = ""


@app.get("/", tags=["Root"], summary="API root")
async def read_root():
    return {"message": "Welcome to the FeedFinder API!"}


@app.post(
    "/discoverFeeds",
    tags=["Feed"],
    summary="Discover feeds in supplied HTML",
    description="Scan the given HTML, resolving links against ``base_url``. No network access.",
)
async def discover_feeds(request: DiscoverRequest) -> List[Dict[str, str]]:
    try:
        feeds = discover(request.base_url, request.html)
    except MalformedUrlError as exc:
        logger.warning("Rejected discovery request for %s: %s", request.base_url, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return [feed.to_dict() for feed in feeds]


@app.get(
    "/findFeeds",
    tags=["Feed"],
    summary="Fetch a page and discover its feeds",
    description="Download ``url`` (unless it is a YouTube channel/user/playlist) and list its feeds.",
)
def find_feeds_endpoint(url: str) -> List[Dict[str, str]]:
    # blocking; FastAPI runs plain def handlers in its threadpool
    try:
        feeds = find_feeds(url)
    except MalformedUrlError as exc:
        logger.warning("Rejected find request for %s: %s", url, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except FetchError as exc:
        logger.warning("Upstream fetch failed for %s: %s", url, exc)
        raise HTTPException(status_code=502, detail=str(exc))
    return [feed.to_dict() for feed in feeds]


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
