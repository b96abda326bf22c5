# -*- coding: utf-8 -*-

import unittest
from decimal import Decimal
from urllib.parse import parse_qsl

from ctxcouch import exceptions, options


class EncodeOptionsTestCase(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(options.encode_options({}), '')
        self.assertEqual(options.encode_options({}, options.VIEW_JSON_KEYS), '')

    def test_json_key(self):
        encoded = options.encode_options({'startkey': ['a', 'b']}, options.VIEW_JSON_KEYS)
        self.assertEqual(encoded, 'startkey=%5B%22a%22%2C%22b%22%5D')

    def test_json_key_string(self):
        encoded = options.encode_options({'key': 'foo'}, options.VIEW_JSON_KEYS)
        self.assertEqual(encoded, 'key=%22foo%22')

    def test_scalars(self):
        encoded = options.encode_options({
            'limit': 100,
            'reduce': False,
            'descending': True,
            'stale': 'ok',
        })
        self.assertEqual(dict(parse_qsl(encoded)), {
            'limit': '100',
            'reduce': 'false',
            'descending': 'true',
            'stale': 'ok',
        })

    def test_string_is_escaped(self):
        encoded = options.encode_options({'startkey_docid': 'a b&c=d'})
        self.assertEqual(encoded, 'startkey_docid=a+b%26c%3Dd')

    def test_key_is_escaped(self):
        encoded = options.encode_options({'a&b': 1})
        self.assertEqual(encoded, 'a%26b=1')

    def test_floats(self):
        self.assertEqual(options.encode_options({'f': 0.1}), 'f=0.1')
        self.assertEqual(options.encode_options({'f': 2.0}), 'f=2')
        self.assertEqual(options.encode_options({'f': 1e20}), 'f=100000000000000000000')
        self.assertEqual(options.encode_options({'f': 1.5e-7}), 'f=0.00000015')

    def test_non_finite_float(self):
        self.assertRaises(exceptions.EncodingError, options.encode_options, {'f': float('nan')})
        self.assertRaises(exceptions.EncodingError, options.encode_options, {'f': float('inf')})

    def test_non_finite_float_json_key(self):
        for value in [float('nan'), float('inf'), ['a', float('-inf')]]:
            self.assertRaises(exceptions.EncodingError,
                              options.encode_options, {'key': value}, options.VIEW_JSON_KEYS)

    def test_none_value(self):
        self.assertRaises(exceptions.EncodingError, options.encode_options, {'limit': None})

    def test_none_value_json_key(self):
        self.assertRaises(exceptions.EncodingError,
                          options.encode_options, {'key': None}, options.VIEW_JSON_KEYS)

    def test_unsupported_type(self):
        with self.assertRaises(exceptions.EncodingError) as cm:
            options.encode_options({'startkey': ['a']})
        self.assertIn('startkey', str(cm.exception))
        self.assertIn('list', str(cm.exception))
        self.assertRaises(exceptions.EncodingError, options.encode_options, {'x': Decimal('1')})
        self.assertRaises(exceptions.EncodingError, options.encode_options, {'x': b'bytes'})

    def test_unserializable_json_value(self):
        self.assertRaises(exceptions.EncodingError,
                          options.encode_options, {'keys': [object()]}, options.VIEW_JSON_KEYS)

    def test_encoding_error_is_value_error(self):
        self.assertRaises(ValueError, options.encode_options, {'limit': None})

    def test_round_trip(self):
        opts = {
            'startkey': ['Zingylemontart', 'Yogurtraita'],
            'limit': 100,
            'offset': 5,
            'inclusive_end': False,
            'stale': 'update_after',
        }
        encoded = options.encode_options(opts, options.VIEW_JSON_KEYS)
        self.assertEqual(dict(parse_qsl(encoded)), {
            'startkey': '["Zingylemontart","Yogurtraita"]',
            'limit': '100',
            'offset': '5',
            'inclusive_end': 'false',
            'stale': 'update_after',
        })

    def test_get_json_keys(self):
        encoded = options.encode_options({'open_revs': ['1-a', '2-b'], 'revs': True},
                                         options.GET_JSON_KEYS)
        self.assertEqual(dict(parse_qsl(encoded)), {
            'open_revs': '["1-a","2-b"]',
            'revs': 'true',
        })


class PathTestCase(unittest.TestCase):

    def test_path(self):
        self.assertEqual(options.path('db', 'doc'), '/db/doc')
        self.assertEqual(options.path('db', 'a/b'), '/db/a%2Fb')
        self.assertEqual(options.path('my db', 'doc+1'), '/my%20db/doc%2B1')

    def test_path_keeps_design_prefix(self):
        self.assertEqual(options.path('db', '_design/test'), '/db/_design/test')
        self.assertEqual(options.path('db', '_local/a/b'), '/db/_local/a%2Fb')

    def test_revpath(self):
        self.assertEqual(options.revpath('', 'db', 'doc'), '/db/doc')
        self.assertEqual(options.revpath('1-abc', 'db', 'doc'), '/db/doc?rev=1-abc')

    def test_optpath(self):
        self.assertEqual(options.optpath(None, (), 'db', '_all_docs'), '/db/_all_docs')
        self.assertEqual(options.optpath({}, (), 'db', '_all_docs'), '/db/_all_docs')
        self.assertEqual(options.optpath({'limit': 1}, (), 'db', '_all_docs'),
                         '/db/_all_docs?limit=1')

    def test_optpath_error(self):
        self.assertRaises(exceptions.EncodingError,
                          options.optpath, {'limit': None}, (), 'db', '_all_docs')
