#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""HTTP transport for the CouchDB API, built on `requests`.

The `Transport` turns a method and an encoded path into a request against
the server prefix, attaches the current authentication strategy, and turns
status codes >= 400 into `exceptions.HTTPError` instances.
"""
import logging

import requests
import requests.exceptions
from requests_toolbelt import sessions

from ctxcouch import exceptions
from ctxcouch.context import BACKGROUND
from ctxcouch.util import RWLock

__all__ = ['Session', 'Transport', 'response_rev', 'response_id_rev', 'read_body']

log = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 8
JSON_MIME = 'application/json'


class Session(sessions.BaseUrlSession):
    """`BaseUrlSession` that appends request paths to the base URL.

    ``urljoin`` would drop any path prefix of the base URL (a server mounted
    at ``http://host/couch``), so relative paths are simply concatenated.
    The transport builds every request URL through `create_url` when it owns
    such a session.
    """

    def create_url(self, url):
        if '://' in url or not self.base_url:
            return url
        return self.base_url.rstrip('/') + '/' + url.lstrip('/')


class Transport(object):
    """Request machinery shared by a client and all of its databases.

    :param prefix: server URL prefix, without credentials, query or fragment
    :param session: the `requests.Session` performing the exchanges
    :param auth: the initial authentication strategy, if any
    """

    def __init__(self, prefix, session=None, auth=None):
        self._prefix = prefix.rstrip('/')
        if session is None:
            session = Session(base_url=self._prefix)
        self._session = session
        self._auth_lock = RWLock()
        self._auth = auth

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self._prefix)

    @property
    def prefix(self):
        return self._prefix

    @property
    def session(self):
        return self._session

    @property
    def auth(self):
        with self._auth_lock.reading():
            return self._auth

    def set_auth(self, auth):
        """Replace the authentication strategy; `None` removes it."""
        with self._auth_lock.writing():
            self._auth = auth

    def _prepare(self, method, path, body, headers):
        headers = dict(headers or {})
        if method != 'GET' and body is not None:
            headers.setdefault('Content-Type', JSON_MIME)
        if isinstance(self._session, Session) and self._session.base_url:
            url = self._session.create_url(path)
        else:
            url = self._prefix + path
        req = requests.Request(method, url, data=body, headers=headers)
        prepared = self._session.prepare_request(req)
        with self._auth_lock.reading():
            if self._auth is not None:
                prepared = self._auth(prepared) or prepared
        return prepared

    def request(self, method, path, body=None, ctx=BACKGROUND, headers=None):
        """Send a request to the server and return the unread response.

        :param method: the HTTP method
        :param path: the request path, possibly with an encoded query string
        :param body: the encoded request body, if any
        :param ctx: the cancellation context of the call
        :param headers: extra request headers
        :return: the `requests.Response`, body not yet consumed
        :raise HTTPError: for status codes >= 400
        :raise TransportError: if the exchange itself failed
        """
        timeout = None
        if ctx is None:
            ctx = BACKGROUND
        # the background context can never be done
        if ctx is not BACKGROUND:
            ctx.check()
            timeout = ctx.remaining()
            if timeout is not None and timeout <= 0:
                raise exceptions.Timeout('context deadline exceeded')

        prepared = self._prepare(method, path, body, headers)
        settings = self._session.merge_environment_settings(prepared.url, {}, True, None, None)
        try:
            resp = self._session.send(prepared, timeout=timeout, **settings)
        except requests.exceptions.Timeout as exc:
            raise exceptions.Timeout(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            raise exceptions.TransportError(str(exc)) from exc

        if ctx is not BACKGROUND and ctx.cancelled:
            resp.close()
            raise exceptions.Cancelled('context cancelled')

        log.debug('%s %s: %s', method, prepared.url, resp.status_code)
        if resp.status_code >= 400:
            # from_response closes the body
            error = exceptions.HTTPError.from_response(resp)
            log.debug('%s', error)
            raise error
        return resp

    def closed_request(self, method, path, body=None, ctx=BACKGROUND, headers=None):
        """Like `request`, but drain and close the response body.

        Status and headers of the returned response stay readable.
        """
        resp = self.request(method, path, body, ctx=ctx, headers=headers)
        try:
            for _ in resp.iter_content(CHUNK_SIZE):
                pass
        except requests.exceptions.RequestException as exc:
            raise exceptions.TransportError(str(exc)) from exc
        finally:
            resp.close()
        return resp


def response_rev(response):
    """Return the unquoted ETag of a response."""
    etag = response.headers.get('ETag')
    if not etag:
        raise exceptions.ProtocolError('missing ETag header in response')
    return etag.strip('"')


def read_body(response, target=None):
    """Read the whole response body, close it, and decode it as JSON.

    :param response: the `requests.Response` to read
    :param target: optional callable applied to the decoded value
    :raise DecodingError: if the body is not JSON or does not fit `target`
    """
    try:
        data = response.json()
    # requests' JSONDecodeError is both a ValueError and a RequestException
    except ValueError as exc:
        raise exceptions.DecodingError('invalid JSON in response body: {0}'.format(exc)) from exc
    except requests.exceptions.RequestException as exc:
        raise exceptions.TransportError(str(exc)) from exc
    finally:
        response.close()
    if target is None:
        return data
    try:
        return target(data)
    except (TypeError, ValueError, KeyError, AttributeError) as exc:
        raise exceptions.DecodingError('unexpected response body: {0}'.format(exc)) from exc


def response_id_rev(response):
    """Return the ``id`` and ``rev`` from a write response body."""
    return read_body(response, lambda data: (data['id'], data['rev']))
