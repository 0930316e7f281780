"""Base client module for Backlog XML-RPC interactions."""

import types

from requests import Session
from requests.exceptions import HTTPError, RequestException
from urllib3.exceptions import LocationParseError

from ..exceptions import BacklogAuthenticationError, BacklogTransportError
from ..logging_config import get_logger
from ..models.backlog import BacklogCredentials
from .config import BacklogConfig

logger = get_logger("backlog-bridge.backlog")

XML_CONTENT_TYPE = "text/xml"


class BacklogClient:
    """Base client for Backlog XML-RPC interactions."""

    config: BacklogConfig
    session: Session

    def __init__(
        self, credentials: BacklogCredentials, config: BacklogConfig | None = None
    ) -> None:
        """Initialize the Backlog client for one space and login.

        Args:
            credentials: Space name, login id and password
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If the credentials are incomplete
        """
        if not credentials.is_complete:
            error_msg = "Backlog calls require a valid space name, id and pass"
            raise ValueError(error_msg)

        self.config = config or BacklogConfig.from_env()
        self.credentials = credentials

        self.session = Session()
        self.session.auth = (credentials.id, credentials.password)
        self.session.verify = self.config.ssl_verify
        self.session.headers.update({"Content-Type": XML_CONTENT_TYPE})

        logger.debug(
            f"Initialized Backlog client with Basic authentication. "
            f"URL: {self.url}, Login: {credentials.describe()}"
        )

    @property
    def url(self) -> str:
        return self.config.endpoint_url(self.credentials.space)

    def send(self, body: bytes) -> bytes:
        """POST an XML-RPC request body and return the whole response body.

        Args:
            body: The serialized ``methodCall``

        Returns:
            The raw response body, read to the end of the stream

        Raises:
            BacklogAuthenticationError: If Backlog answers 401 or 403
            BacklogTransportError: If the request fails for any other reason
        """
        try:
            response = self.session.post(
                self.url, data=body, timeout=self.config.timeout
            )
            response.raise_for_status()
        except HTTPError as http_err:
            status_code = (
                http_err.response.status_code
                if http_err.response is not None
                else None
            )
            if status_code in (401, 403):
                error_msg = (
                    f"Authentication failed for Backlog space "
                    f"'{self.credentials.space}' ({status_code}). "
                    "Please verify the login id and password."
                )
                raise BacklogAuthenticationError(error_msg) from http_err
            error_msg = f"HTTP error from {self.url}: {status_code}"
            raise BacklogTransportError(error_msg) from http_err
        except RequestException as req_err:
            error_msg = f"Request to {self.url} failed: {req_err}"
            raise BacklogTransportError(error_msg) from req_err
        except (LocationParseError, ValueError) as url_err:
            # Raised while building the request URL, before any connection
            error_msg = (
                f"Invalid Backlog endpoint for space "
                f"'{self.credentials.space}': {url_err}"
            )
            raise BacklogTransportError(error_msg) from url_err

        logger.debug(f"Received {len(response.content)} bytes from {self.url}")
        return response.content

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BacklogClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        self.close()
