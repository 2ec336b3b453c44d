import itertools
from decimal import Decimal

import ijson

from .interface_decoder import IDecoder
from .resreader_errors import DecodingError


class JsonDecoder(IDecoder):
    def __init__(self, stream):
        self._stream = stream

    def decode(self, target) -> None:
        events = ijson.parse(self._stream)
        first = next(events, None)
        if first is None:
            raise DecodingError("Failed to decode JSON: empty body")

        expected = "start_array" if isinstance(target, list) else "start_map"
        if first[1] != expected:
            raise DecodingError(
                f"Failed to decode JSON: cannot decode top-level {first[1]} into {type(target).__name__}"
            )
        events = itertools.chain([first], events)

        if isinstance(target, list):
            for item in ijson.items(events, "item"):
                target.append(_convert_decimals_to_floats(item))
            return

        for k, v in ijson.kvitems(events, ""):
            if isinstance(target, dict):
                target[k] = _convert_decimals_to_floats(v)
            else:
                setattr(target, k, _convert_decimals_to_floats(v))


def _convert_decimals_to_floats(obj):
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, dict):
        return {k: _convert_decimals_to_floats(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_decimals_to_floats(v) for v in obj]
    return obj
