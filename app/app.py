"""Single page meal browser.

Serve with `uvicorn app.app:app`.
"""
import contextlib
import functools
import logging
from typing import Awaitable, Callable
import uuid

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route
import uvicorn

from app import config
from app.html.view import render_view
from app.log import setup_logging
from app.sessions import Sessions
from domain.meal_db import MealDBClient
from domain.view_state import ViewStateController


logger = logging.getLogger(__name__)


CONFIG = config.Config()


SESSION_COOKIE = "session_id"


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


def aHTMLResponse(route: Callable[[Request], Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(request: Request) -> HTMLResponse:
        resp = await route(request)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        response = HTMLResponse(html, status_code=code)
        new_session = getattr(request.state, "new_session", None)
        if new_session is not None:
            response.set_cookie(
                SESSION_COOKIE, new_session, httponly=True, samesite="lax"
            )
        return response

    return wrapper


def controller_for(request: Request) -> ViewStateController:
    """The controller of the browser session, created on first visit."""
    sessions: Sessions = request.app.state.sessions
    controller = sessions.get(request.cookies.get(SESSION_COOKIE))
    if controller is None:
        session_id = uuid.uuid4().hex
        controller = ViewStateController(request.app.state.meal_db)
        sessions.add(session_id, controller)
        request.state.new_session = session_id
        logger.info("New session %s", session_id)
    return controller


def view(controller: ViewStateController) -> str:
    return render_view(
        controller.state,
        environment=TEMPLATES,
        fetch_on_load=not controller.has_fetched,
    )


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    setup_logging(CONFIG.log_level)
    yield
    await app.state.meal_db.aclose()


@aHTMLResponse
async def homepage(request: Request) -> str:
    controller = controller_for(request)
    return TEMPLATES.get_template("index.html").render(
        query_text=controller.state.query_text,
        view=view(controller),
    )


@aHTMLResponse
async def random_meal(request: Request) -> str:
    controller = controller_for(request)
    await controller.fetch_random()
    return view(controller)


@aHTMLResponse
async def search(request: Request) -> str:
    controller = controller_for(request)
    query = request.query_params.get("q", "")
    controller.state.query_text = query
    await controller.search(query)
    return view(controller)


@aHTMLResponse
async def select_result(request: Request) -> str | tuple[str, int]:
    controller = controller_for(request)
    recipe = controller.result_by_id(request.path_params["id"])
    if recipe is None:
        html = TEMPLATES.get_template("view-error.html").render(
            message="That meal is not in the current results."
        )
        return html, 404
    controller.select_from_results(recipe)
    return view(controller)


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/", homepage),
        Route("/random", random_meal, methods=["POST"]),
        Route("/search", search, methods=["GET"]),
        Route("/results/{id}", select_result, methods=["POST"]),
    ],
    lifespan=lifespan,
)

app.state.meal_db = MealDBClient(
    base_url=CONFIG.meal_db_url,
    timeout=CONFIG.request_timeout,
)
app.state.sessions = Sessions(max_size=CONFIG.max_sessions)


def run() -> None:
    uvicorn.run("app.app:app", host=CONFIG.host, port=CONFIG.port)
