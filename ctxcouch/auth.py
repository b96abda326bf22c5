"""Authentication strategies.

An authentication strategy decorates an outgoing `requests.PreparedRequest`
with credentials. Any `requests.auth.AuthBase` works with the transport;
subclasses of `Auth` only implement `add_auth`.
"""
from requests.auth import AuthBase, _basic_auth_str

__all__ = ['Auth', 'BasicAuth']


class Auth(AuthBase):
    """Base class for authentication strategies."""

    def add_auth(self, request):
        """Add credentials to `request` in place."""
        raise NotImplementedError

    def __call__(self, request):
        self.add_auth(request)
        return request


class BasicAuth(Auth):
    """HTTP basic authentication.

    >>> BasicAuth('user', 'password').header
    'Basic dXNlcjpwYXNzd29yZA=='
    """

    def __init__(self, username, password):
        self.username = username
        self.password = password

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.username)

    def __eq__(self, other):
        return (isinstance(other, BasicAuth)
                and (self.username, self.password) == (other.username, other.password))

    def __ne__(self, other):
        return not self == other

    @property
    def header(self):
        # requests encodes str credentials as latin-1
        return _basic_auth_str(_utf8(self.username), _utf8(self.password))

    def add_auth(self, request):
        request.headers['Authorization'] = self.header


def _utf8(value):
    if isinstance(value, str):
        return value.encode('utf-8')
    return value
