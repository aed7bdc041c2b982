import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, Response
from starlette.routing import BaseRoute, Mount, Route
from starlette.staticfiles import StaticFiles

from mealfinder import config
from mealfinder.api import create_api
from mealfinder.domain.lookup import MealLookupService
from mealfinder.domain.mealdb import MealDBClient
from mealfinder.domain.search_view import SearchView
from mealfinder.html.search_page import SearchPage


logger = logging.getLogger(__name__)


CONFIG = config.Config()


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def _page(request: Request, view: SearchView) -> SearchPage:
    return SearchPage(view, environment=request.app.state.templates)


@aHTMLResponse
async def homepage(request: Request) -> str:
    view = SearchView(request.app.state.lookup)
    name = request.query_params.get("name")
    if name is not None:
        view.on_query_change(name)
        await view.on_submit()
    return _page(request, view).render()


async def search(request: Request) -> Response:
    view = SearchView(request.app.state.lookup)
    view.on_query_change(request.query_params.get("name", ""))
    if not await view.on_submit():
        # Nothing to swap, htmx leaves the current results alone.
        return Response(status_code=204)
    return HTMLResponse(_page(request, view).render_results())


def create_app(
    conf: config.Config | None = None,
    *,
    lookup: MealLookupService | None = None,
    mealdb: MealDBClient | None = None,
) -> Starlette:
    conf = CONFIG if conf is None else conf
    lookup = (
        MealLookupService(conf.api_url, timeout=conf.timeout)
        if lookup is None
        else lookup
    )
    mealdb = (
        MealDBClient(conf.mealdb_api_url, timeout=conf.timeout)
        if mealdb is None
        else mealdb
    )

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        logger.info("Searching meals through %s", conf.api_url)
        async with contextlib.AsyncExitStack() as stack:
            stack.push_async_callback(app.state.mealdb.aclose)
            stack.push_async_callback(app.state.lookup.aclose)
            yield

    routes: list[BaseRoute] = [
        Route("/", homepage),
        Route("/search", search),
        Mount("/assets", StaticFiles(directory=conf.assets_dir), name="assets"),
    ]
    if conf.serve_api:
        routes.append(create_api(conf.cors_origins))

    app = Starlette(debug=conf.debug, routes=routes, lifespan=lifespan)

    app.state.templates = Environment(
        loader=FileSystemLoader(conf.html_dir),
        autoescape=select_autoescape(),
    )
    app.state.lookup = lookup
    app.state.mealdb = mealdb
    return app


app = create_app()
