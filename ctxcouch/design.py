# -*- coding: utf-8 -*-
#
# Copyright (C) 2008 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Design documents and their views.

A `Design` is built locally and pushed to a database with
`Database.sync_design`, which only writes when the view definitions differ
from the stored ones:

>>> design = Design('tests')
>>> design.add_view('all', View('function(doc) { emit(doc._id, null); }'))
>>> design.id
'_design/tests'
>>> sorted(design.to_json())
['_id', 'language', 'views']
"""
import hashlib
import json

__all__ = ['Design', 'View']

DESIGN_PREFIX = '_design/'


class View(object):
    """A view definition: a map function and an optional reduce function."""

    def __init__(self, map_fun, reduce_fun=None):
        self.map_fun = map_fun
        self.reduce_fun = reduce_fun

    def __repr__(self):
        return '<%s map=%r reduce=%r>' % (type(self).__name__, self.map_fun, self.reduce_fun)

    def __eq__(self, other):
        return (isinstance(other, View)
                and (self.map_fun, self.reduce_fun) == (other.map_fun, other.reduce_fun))

    def __ne__(self, other):
        return not self == other

    def to_json(self):
        funcs = {'map': self.map_fun}
        if self.reduce_fun:
            funcs['reduce'] = self.reduce_fun
        return funcs

    @classmethod
    def from_json(cls, data):
        return cls(data.get('map', ''), data.get('reduce'))


class Design(object):
    """A design document holding named views.

    :param name: the design document name, with or without ``_design/``
    :param language: the language of the view functions
    """

    def __init__(self, name, language='javascript'):
        if not name.startswith(DESIGN_PREFIX):
            name = DESIGN_PREFIX + name
        self.id = name
        self.rev = ''
        self.language = language
        self.views = {}

    def __repr__(self):
        return '<%s %r@%r %r>' % (type(self).__name__, self.id, self.rev, sorted(self.views))

    @property
    def name(self):
        return self.id[len(DESIGN_PREFIX):]

    def add_view(self, name, view):
        self.views[name] = view

    def view_checksum(self):
        """Checksum of the view definitions, for change detection only."""
        views = {name: view.to_json() for name, view in self.views.items()}
        text = json.dumps(views, sort_keys=True, separators=(',', ':'))
        return hashlib.sha1(text.encode('utf-8')).hexdigest()

    def to_json(self):
        doc = {
            '_id': self.id,
            'language': self.language,
            'views': {name: view.to_json() for name, view in self.views.items()},
        }
        if self.rev:
            doc['_rev'] = self.rev
        return doc

    @classmethod
    def from_json(cls, data):
        design = cls(data['_id'], data.get('language') or 'javascript')
        design.rev = data.get('_rev', '')
        for name, funcs in (data.get('views') or {}).items():
            design.add_view(name, View.from_json(funcs))
        return design
