"""HTTP surface of the Backlog bridge."""

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from .dispatcher import BacklogDispatcher
from .logging_config import get_logger
from .models.backlog import BacklogCredentials

logger = get_logger("backlog-bridge.server")

INBOUND_FIELDS = (
    "space",
    "id",
    "pass",
    "method",
    "project",
    "issue_type",
    "component",
    "status",
    "assigner",
)


async def read_inbound_fields(request: Request) -> dict[str, str]:
    """Collect the recognized fields from the query string and form body.

    Form values win over query string values. Missing fields are empty.
    """
    fields: dict[str, str] = dict(request.query_params)
    if request.method == "POST":
        form = await request.form()
        for key, value in form.items():
            if isinstance(value, str):
                fields[key] = value
    return {name: fields.get(name, "") for name in INBOUND_FIELDS}


def create_app(dispatcher: BacklogDispatcher | None = None) -> Starlette:
    """Build the Starlette application serving ``/backlog`` and ``/healthz``."""
    backlog_dispatcher = dispatcher or BacklogDispatcher()

    async def backlog_endpoint(request: Request) -> JSONResponse:
        fields = await read_inbound_fields(request)
        credentials = BacklogCredentials.from_params(fields)
        logger.debug(
            f"Inbound request: method='{fields['method']}', "
            f"login={credentials.describe()}"
        )
        # The remote round-trip blocks; keep it off the event loop.
        result = await run_in_threadpool(
            backlog_dispatcher.dispatch, credentials, fields["method"], fields
        )
        return JSONResponse(result)

    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return Starlette(
        routes=[
            Route("/backlog", endpoint=backlog_endpoint, methods=["GET", "POST"]),
            Route("/healthz", endpoint=health_check, methods=["GET"]),
        ],
    )


def run_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Serve the application with uvicorn until interrupted."""
    import uvicorn

    app = create_app()
    logger.info(f"Serving Backlog bridge on http://{host}:{port}/backlog")
    uvicorn.run(app, host=host, port=port, log_config=None)
