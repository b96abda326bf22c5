import collections


class ViewResult(object):
    """Result of a view or ``_all_docs`` query; contains rows, offset,
    total_rows and, for CouchDB 2.x clusters, update_seq.
    Instances of this class are not supposed to be created by client software.
    """

    def __init__(self, rows, offset=None, total_rows=None, update_seq=None):
        self.rows = rows
        self.offset = offset
        self.total_rows = total_rows
        self.update_seq = update_seq

    def __len__(self):
        return len(self.rows)

    def __getitem__(self, i):
        return self.rows[i]

    def __iter__(self):
        return iter(self.rows)

    def __repr__(self):
        return '<%s total_rows=%r offset=%r rows=%d>' % (
            type(self).__name__, self.total_rows, self.offset, len(self.rows))

    @classmethod
    def from_json(cls, data):
        rows = [
            Row(r.get("id"), r.get("key"), r.get("value"), r.get("error"), r.get("doc"))
            for r in data.get("rows", [])
        ]
        return cls(rows, data.get("offset"), data.get("total_rows"), data.get("update_seq"))

    def json(self):
        "Return data in a JSON-like representation."
        result = dict()
        result["total_rows"] = self.total_rows
        result["offset"] = self.offset
        result["rows"] = [row.json() for row in self.rows]
        return result


class Row(collections.namedtuple("Row", ["id", "key", "value", "error", "doc"])):
    __slots__ = ()

    def json(self):
        result = {"id": self.id, "key": self.key, "value": self.value}
        if self.error is not None:
            result["error"] = self.error
        if self.doc is not None:
            result["doc"] = self.doc
        return result
