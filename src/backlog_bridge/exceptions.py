class BacklogBridgeError(Exception):
    """Base exception for Backlog bridge errors."""

    pass


class BacklogTransportError(BacklogBridgeError):
    """Raised when the HTTP round-trip to the Backlog XML-RPC endpoint fails."""

    pass


class BacklogAuthenticationError(BacklogTransportError):
    """Raised when Backlog rejects the supplied credentials (401/403)."""

    pass


class BacklogMalformedResponseError(BacklogBridgeError):
    """Raised when a response body cannot be parsed as an XML-RPC envelope."""

    pass


class BacklogFaultError(BacklogMalformedResponseError):
    """Raised when the server answers with an XML-RPC fault envelope."""

    def __init__(self, fault_code: str, fault_string: str) -> None:
        self.fault_code = fault_code
        self.fault_string = fault_string
        super().__init__(f"XML-RPC fault {fault_code}: {fault_string}")
