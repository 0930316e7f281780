"""
Dispatch of inbound Backlog requests.

Maps a method name to its remote call, checks the credentials and runs
compose → send → decode. Invalid input yields ``None`` without touching the
network; transport and decode failures are reported and also yield ``None``.
"""

from collections.abc import Callable, Mapping

from .backlog import BacklogConfig, BacklogFetcher, get_remote_call
from .backlog.calls import Record
from .exceptions import BacklogBridgeError
from .logging_config import get_logger, log_operation
from .models.backlog import BacklogCredentials

logger = get_logger("backlog-bridge.dispatcher")

Reporter = Callable[[BacklogBridgeError], None]
FetcherFactory = Callable[[BacklogCredentials, BacklogConfig], BacklogFetcher]


def report_error(error: BacklogBridgeError) -> None:
    """Default error sink: log the failure with its cause."""
    cause = error.__cause__
    if cause is not None:
        logger.error(f"{error} (caused by {type(cause).__name__}: {cause})")
    else:
        logger.error(str(error))


class BacklogDispatcher:
    """Routes inbound method names to the Backlog remote calls."""

    def __init__(
        self,
        config: BacklogConfig | None = None,
        fetcher_factory: FetcherFactory | None = None,
        report: Reporter | None = None,
    ) -> None:
        """
        Args:
            config: Backlog configuration (will use env vars if not provided)
            fetcher_factory: Builds the client for one call; defaults to BacklogFetcher
            report: Sink for transport and decode failures; defaults to logging
        """
        self.config = config or BacklogConfig.from_env()
        self.fetcher_factory = fetcher_factory or BacklogFetcher
        self.report = report or report_error

    def execute(
        self,
        credentials: BacklogCredentials,
        method: str,
        params: Mapping[str, str],
    ) -> list[Record] | None:
        """
        Run one call, letting transport and decode errors propagate.

        Returns:
            The decoded records, or None for incomplete credentials (including
            a space that is not a host label), an empty or unknown method, or
            parameters that cannot be written as XML

        Raises:
            BacklogTransportError: If the HTTP round-trip fails
            BacklogMalformedResponseError: If the response cannot be decoded
        """
        if not credentials.is_complete or not method:
            logger.debug("Missing or invalid space, id, pass or method")
            return None

        call = get_remote_call(method)
        if call is None:
            logger.debug(f"Unknown method '{method}'")
            return None

        try:
            body = call.compose(params)
        except ValueError as e:
            # lxml refuses text that cannot appear in XML (control characters)
            logger.warning(f"Cannot compose {call.xmlrpc_method}: {e}")
            return None

        with log_operation(logger, call.name, space=credentials.space):
            with self.fetcher_factory(credentials, self.config) as fetcher:
                response_body = fetcher.send(body)
            records = call.decode(response_body)
            logger.info(f"{call.xmlrpc_method} returned {len(records)} records")
        return records

    def dispatch(
        self,
        credentials: BacklogCredentials,
        method: str,
        params: Mapping[str, str],
    ) -> list[Record] | None:
        """
        Run one call and apply the error policy.

        Returns:
            The decoded records, or None when the input is invalid or the call
            failed. Failures are passed to the reporter first.
        """
        try:
            return self.execute(credentials, method, params)
        except BacklogBridgeError as e:
            self.report(e)
            return None


def dispatch(
    credentials: BacklogCredentials,
    method: str,
    params: Mapping[str, str],
    config: BacklogConfig | None = None,
) -> list[Record] | None:
    """Dispatch one request with a default dispatcher."""
    return BacklogDispatcher(config=config).dispatch(credentials, method, params)
