"""Client layer errors."""


class ClientError(Exception):
    """Base client error."""

    pass


class LikeRequestError(ClientError):
    """A like request failed (transport error or error envelope).

    message is the user-facing text, taken from the server envelope when
    there is one.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CoordinatorClosedError(ClientError):
    """Raised when toggling a coordinator after close()."""

    pass
