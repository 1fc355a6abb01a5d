class ServiceError(Exception):
    """Base error that the API layer knows how to render for a client."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class InternalError(ServiceError):
    status_code = 500


class DownstreamUnavailable(Exception):
    """The order-management system could not give us a usable answer.

    Never rendered to a client: order reads fall back to local data.
    """
