import requests.exceptions


class CouchDBException(Exception):
    """There was an ambiguous error interacting with CouchDB."""
    pass


class TransportError(CouchDBException):
    """The HTTP exchange itself failed (connection, DNS, TLS, ...)."""
    pass


class Timeout(TransportError):
    """The request timed out or its context deadline passed."""
    pass


class Cancelled(TransportError):
    """The request context was cancelled."""
    pass


class EncodingError(CouchDBException, ValueError):
    """A query option or request body could not be encoded."""
    pass


class DecodingError(CouchDBException, ValueError):
    """A response body did not decode into the expected shape."""
    pass


class ProtocolError(CouchDBException):
    """A successful response lacked something CouchDB always sends."""
    pass


UNKNOWN_ERROR = "unknown, couldn't decode CouchDB error: {cause}"


class HTTPError(CouchDBException):
    """API-level error, reported by CouchDB as
    ``{"error": <error code>, "reason": <reason>}``.

    ``error`` and ``reason`` are ``None`` for HEAD requests, which carry no
    body.
    """
    status_code = None

    def __init__(self, method, url, status_code=None, error=None, reason=None):
        if status_code is None:
            status_code = self.__class__.status_code
        self.method = method
        self.url = url
        self.status_code = status_code
        self.error = error
        self.reason = reason
        super(HTTPError, self).__init__(str(self))

    def __str__(self):
        if not self.error:
            return "{0} {1}: {2}".format(self.method, self.url, self.status_code)
        return "{0} {1}: ({2}) {3}: {4}".format(
            self.method, self.url, self.status_code, self.error, self.reason)

    def __reduce__(self):
        return (type(self), (self.method, self.url, self.status_code, self.error, self.reason))

    @classmethod
    def from_response(cls, response):
        """Build the error for a failed `requests.Response`.

        The response body is consumed and the response closed.
        """
        method = response.request.method
        error = reason = None
        try:
            if method != "HEAD":
                try:
                    reply = response.json()
                    error, reason = reply.get("error"), reply.get("reason")
                except (ValueError, AttributeError, requests.exceptions.RequestException) as exc:
                    error = reason = UNKNOWN_ERROR.format(cause=exc)
        finally:
            response.close()
        return http_error_lookup(method, response.request.url, response.status_code, error, reason)


class HTTPBadRequest(HTTPError):
    """400 Bad Request"""
    status_code = 400


class HTTPUnauthorized(HTTPError):
    """401 Unauthorized"""
    status_code = 401


class HTTPForbidden(HTTPError):
    """403 Forbidden"""
    status_code = 403


class HTTPNotFound(HTTPError):
    """404 Not Found"""
    status_code = 404


class HTTPConflict(HTTPError):
    status_code = 409


class HTTPPreconditionFailed(HTTPError):
    status_code = 412


_http_error_lookup = {
    exc.status_code: exc for exc in [HTTPBadRequest, HTTPUnauthorized, HTTPForbidden, HTTPNotFound, HTTPConflict, HTTPPreconditionFailed]
}


def http_error_lookup(method, url, status_code, error=None, reason=None):
    exc_type = _http_error_lookup.get(status_code, HTTPError)
    return exc_type(method, url, status_code, error, reason)


def error_status(err, status_code):
    """Whether `err` is an `HTTPError` with the given status code."""
    return isinstance(err, HTTPError) and err.status_code == status_code


def not_found(err):
    """Whether `err` is a 404 `HTTPError`.

    Useful for conditional creation of databases and documents.
    """
    return error_status(err, 404)


def unauthorized(err):
    """Whether `err` is a 401 `HTTPError`."""
    return error_status(err, 401)


def conflict(err):
    """Whether `err` is a 409 `HTTPError`."""
    return error_status(err, 409)
