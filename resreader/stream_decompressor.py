import gzip
import zlib

import brotli

from . import globals
from .resreader_errors import DecodingError, InvalidInputError

GZIP = "gzip"
BROTLI = "br"
SUPPORTED_ENCODINGS = (GZIP, BROTLI)

_BROTLI_READ_SIZE = 16 * 1024


class StreamDecompressor:
    """
    A lazily decompressing, read-only view over a response body.

    Closing it never closes the body; the body is released by body_closer.
    """

    def __init__(self, raw, encoding):
        self.raw = raw
        self.encoding = encoding
        self.closed = False

        if encoding == GZIP:
            self.gzip_decompressor = gzip.GzipFile(fileobj=raw, mode="rb")
        elif encoding == BROTLI:
            self.brotli_decompressor = brotli.Decompressor()
            self._pending = b""
            self._eof = False
        else:
            raise DecodingError(f"Unsupported content encoding {encoding!r}")

    def readable(self):
        return True

    def read(self, size=-1):
        if self.closed:
            raise ValueError("I/O operation on closed decompressor")
        if size is None:
            size = -1

        if self.encoding == GZIP:
            return self._read_gzip(size)
        return self._read_brotli(size)

    def close(self):
        if self.closed:
            return
        self.closed = True
        if self.encoding == GZIP:
            self.gzip_decompressor.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def _read_gzip(self, size):
        try:
            return self.gzip_decompressor.read(size)
        except (gzip.BadGzipFile, zlib.error, EOFError) as e:
            raise DecodingError(f"Failed to decompress gzip body: {e}") from e

    def _read_brotli(self, size):
        if size == 0:
            return b""

        while not self._eof and (size < 0 or len(self._pending) < size):
            data = self.raw.read(_BROTLI_READ_SIZE)
            if not data:
                self._eof = True
                if not self.brotli_decompressor.is_finished():
                    raise DecodingError("Failed to decompress br body: stream ended early")
                break
            try:
                self._pending += self.brotli_decompressor.process(data)
            except brotli.error as e:
                raise DecodingError(f"Failed to decompress br body: {e}") from e

        if size < 0:
            result, self._pending = self._pending, b""
        else:
            result, self._pending = self._pending[:size], self._pending[size:]
        return result


def content_encoding(response) -> str:
    headers = getattr(response, "headers", None)
    if headers is None:
        return ""
    value = headers.get("Content-Encoding")
    if value is None:
        return ""
    return str(value).strip().lower()


def check_response(response):
    if response is None:
        raise InvalidInputError("http response was None")
    if getattr(response, "raw", None) is None:
        raise InvalidInputError("http response body was None")


def stream_for(response):
    """
    Returns a readable stream over the decoded body of the given response

    :param response: A completed response exposing headers and a raw body
    :return: A StreamDecompressor for gzip and br bodies, the raw body otherwise
    """
    check_response(response)

    encoding = content_encoding(response)
    if encoding in SUPPORTED_ENCODINGS:
        return StreamDecompressor(response.raw, encoding)

    if encoding:
        globals.logger.log_process("Stream Decompressor", f"Passing through content encoding {encoding}")
    return response.raw
