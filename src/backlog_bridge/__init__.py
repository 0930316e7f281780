import json
import os

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import get_logger, log_operation, setup_logger

logger = get_logger("backlog-bridge")


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=None,
    help="Enable/disable file logging (default: LOG_TO_FILE)",
)
@click.option(
    "--backlog-host",
    help="Host suffix of the Backlog spaces (e.g., backlog.jp or backlog.com)",
)
@click.option(
    "--backlog-timeout",
    type=float,
    help="Timeout in seconds for the XML-RPC round-trip",
)
@click.option(
    "--backlog-ssl-verify/--no-backlog-ssl-verify",
    default=None,
    help="Verify SSL certificates (default: BACKLOG_SSL_VERIFY, else verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool | None,
    backlog_host: str | None,
    backlog_timeout: float | None,
    backlog_ssl_verify: bool | None,
) -> None:
    """Backlog bridge - Backlog XML-RPC calls as flat JSON records."""
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    # Load environment variables from file if specified, otherwise try default .env
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    if log_dir:
        os.environ["LOG_DIR"] = log_dir

    setup_logger(
        name="backlog-bridge",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    if env_file:
        logger.info(f"Loaded environment from file: {env_file}")

    # Set environment variables from command line arguments if provided
    if backlog_host:
        os.environ["BACKLOG_HOST"] = backlog_host
    if backlog_timeout is not None:
        os.environ["BACKLOG_TIMEOUT"] = str(backlog_timeout)
    if backlog_ssl_verify is not None:
        os.environ["BACKLOG_SSL_VERIFY"] = str(backlog_ssl_verify).lower()


@main.command()
@click.option("--host", default="127.0.0.1", help="Interface to bind")
@click.option("--port", default=8000, help="Port to listen on")
def serve(host: str, port: int) -> None:
    """Serve the /backlog HTTP endpoint."""
    from .server import run_server

    with log_operation(logger, "application_startup", app_version=__version__):
        logger.info(f"Starting Backlog bridge v{__version__}")
    run_server(host=host, port=port)


@main.command()
@click.option("--space", required=True, help="Backlog space name")
@click.option("--id", "login_id", required=True, help="Backlog login id")
@click.option(
    "--pass",
    "password",
    envvar="BACKLOG_PASSWORD",
    prompt=True,
    hide_input=True,
    help="Backlog password (or BACKLOG_PASSWORD)",
)
@click.option("--method", required=True, help="Remote call, e.g. get_projects")
@click.option("--project", default="", help="Project id")
@click.option("--issue-type", default="", help="Comma-separated issue type ids")
@click.option("--component", default="", help="Comma-separated component ids")
@click.option("--status", default="", help="Comma-separated status ids")
@click.option("--assigner", default="", help="Comma-separated assigner ids")
def call(
    space: str,
    login_id: str,
    password: str,
    method: str,
    project: str,
    issue_type: str,
    component: str,
    status: str,
    assigner: str,
) -> None:
    """Run one remote call and print the JSON result."""
    from .dispatcher import BacklogDispatcher
    from .models.backlog import BacklogCredentials

    params = {
        "project": project,
        "issue_type": issue_type,
        "component": component,
        "status": status,
        "assigner": assigner,
    }
    credentials = BacklogCredentials(space=space, id=login_id, password=password)
    result = BacklogDispatcher().dispatch(credentials, method, params)
    click.echo(json.dumps(result, ensure_ascii=False))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
