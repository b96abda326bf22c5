# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

import json
import threading
from contextlib import contextmanager

from ctxcouch import exceptions


def jsons(data):
    """Convert data into a compact JSON string."""
    return json.dumps(data, ensure_ascii=False, separators=(',', ':'))


def encode_body(doc):
    """Serialize a request body into UTF-8 JSON bytes.

    Objects providing a ``to_json()`` method are serialized through it.
    """
    if hasattr(doc, 'to_json'):
        doc = doc.to_json()
    try:
        return jsons(doc).encode('utf-8')
    except (TypeError, ValueError) as exc:
        raise exceptions.EncodingError('invalid request body: {0}'.format(exc)) from exc


class RWLock(object):
    """Reader/writer lock: any number of readers, or a single writer.

    Writers wait for active readers to leave and block new readers while
    they wait.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def reading(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def writing(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
