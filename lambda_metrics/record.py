from collections.abc import MutableMapping

from .catalog import OUTPUT_NAMES, SUCCESS_KEY
from .errors import UnknownMetricError

ALLOWED_KEYS = OUTPUT_NAMES | {SUCCESS_KEY}


class MetricRecord(MutableMapping):
    """Output name -> float. Only catalog outputs and the derived success count may be set."""

    def __init__(self, values=None):
        self._values = {}
        if values:
            self.update(values)

    def __getitem__(self, name):
        return self._values[name]

    def __setitem__(self, name, value):
        if name not in ALLOWED_KEYS:
            raise UnknownMetricError(name)
        self._values[name] = float(value)

    def __delitem__(self, name):
        del self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"MetricRecord({self._values!r})"

    def as_dict(self):
        return dict(self._values)
