# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Context-aware client for the CouchDB HTTP API.

Unless otherwise noted, every function and method in this package can be
called from several threads at the same time.
"""

from ctxcouch import exceptions
from ctxcouch.auth import Auth, BasicAuth
from ctxcouch.bulk import BulkDocsResult, reconcile
from ctxcouch.client import Client, Database, Document, Members, Security
from ctxcouch.context import BACKGROUND, Context, with_cancel, with_deadline, with_timeout
from ctxcouch.design import Design, View
from ctxcouch.exceptions import conflict, error_status, not_found, unauthorized
from ctxcouch.options import encode_options
from ctxcouch.views import Row, ViewResult

__version__ = '1.3.0'
