"""HTML page routes."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portal_server import __version__
from portal_server.api.deps import EpisodeCatalogDep

WEB_DIR = Path(__file__).parent
STATIC_DIR = WEB_DIR / "static"

router = APIRouter(tags=["views"])
templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, episode_catalog: EpisodeCatalogDep):
    """Main page; episodes and stats are fetched by the browser script."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "season": episode_catalog.season,
            "version": __version__,
        },
    )
