class Table:
    """Records of one entity kind keyed by integer id.

    Ids come from a counter that starts at 1 and only moves forward, so an id
    is never handed out twice even after its record is deleted. Iteration
    follows insertion order.
    """

    def __init__(self, name):
        self.name = name
        self._rows = {}
        self._current_id = 1

    def next_id(self):
        row_id = self._current_id
        self._current_id += 1
        return row_id

    def get(self, row_id):
        return self._rows.get(row_id)

    def put(self, record):
        self._rows[record.id] = record
        return record

    def delete(self, row_id):
        return self._rows.pop(row_id, None) is not None

    def find(self, predicate):
        return next((row for row in self._rows.values() if predicate(row)), None)

    def filter(self, predicate=None):
        if predicate is None:
            return list(self._rows.values())
        return [row for row in self._rows.values() if predicate(row)]

    def __len__(self):
        return len(self._rows)

    def __repr__(self):
        return f'<Table {self.name} ({len(self)} rows)>'
