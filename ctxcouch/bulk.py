"""Bulk document operations.

CouchDB does not promise that ``_bulk_docs`` results come back in request
order, so results are paired with the submitted documents by ``_id``.
"""
import collections

__all__ = ['BulkDocsResult', 'bulk_docs_request', 'bulk_get_request', 'parse_bulk_docs',
           'parse_bulk_get', 'reconcile']


class BulkDocsResult(collections.namedtuple('BulkDocsResult', ['ok', 'id', 'rev', 'error', 'reason'])):
    """Outcome of one document in a bulk update.

    Successful entries carry ``rev``; failed ones ``error`` and ``reason``.
    """
    __slots__ = ()

    @classmethod
    def from_json(cls, data):
        return cls(
            ok=bool(data.get('ok', False)) and 'error' not in data,
            id=data.get('id', ''),
            rev=data.get('rev'),
            error=data.get('error'),
            reason=data.get('reason'),
        )


def bulk_docs_request(docs):
    return {'docs': [doc.to_json() if hasattr(doc, 'to_json') else doc for doc in docs]}


def bulk_get_request(ids):
    return {'docs': [{'id': id} for id in ids]}


def parse_bulk_docs(data):
    return [BulkDocsResult.from_json(item) for item in data]


def parse_bulk_get(data, wrapper):
    """Split a ``_bulk_get`` response into found documents and missing ids.

    Each found document is decoded into a fresh ``wrapper(doc)`` instance.
    """
    docs, not_found = [], []
    for result in data.get('results', []):
        entries = result.get('docs') or []
        if not entries:
            continue
        entry = entries[0]
        if entry.get('error') is not None or entry.get('ok') is None:
            not_found.append(result.get('id'))
        else:
            docs.append(wrapper(entry['ok']))
    return docs, not_found


def reconcile(docs, results):
    """Pair submitted documents with their results by document id.

    Documents without an ``_id`` (ids assigned by the server) cannot be
    matched and are paired with ``None``.

    :return: list of ``(doc, result)`` tuples in submission order
    """
    by_id = collections.defaultdict(collections.deque)
    for result in results:
        by_id[result.id].append(result)
    pairs = []
    for doc in docs:
        doc_id = _doc_id(doc)
        queue = by_id.get(doc_id) if doc_id is not None else None
        pairs.append((doc, queue.popleft() if queue else None))
    return pairs


def _doc_id(doc):
    if hasattr(doc, 'to_json'):
        doc = doc.to_json()
    try:
        return doc.get('_id')
    except AttributeError:
        return None
