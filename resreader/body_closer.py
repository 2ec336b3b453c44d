from contextlib import contextmanager

from . import globals
from .reader_options import DEFAULT_DRAIN_CHUNK_SIZE
from .resreader_errors import ReadError
from .stream_decompressor import check_response


def close(response, chunk_size: int = DEFAULT_DRAIN_CHUNK_SIZE) -> int:
    """
    Reads the raw body of the response to exhaustion and closes it,
    so the underlying connection can be released back to its pool

    :param response: The response whose body should be released
    :param chunk_size: The number of bytes to discard per read
    :return: The number of unread bytes that were discarded
    """
    check_response(response)
    body = response.raw
    drained = 0
    try:
        while True:
            chunk = body.read(chunk_size)
            if not chunk:
                break
            drained += len(chunk)
    except Exception as e:
        try:
            body.close()
        except Exception as close_error:
            globals.logger.log_process("Body Closer", f"Close after failed drain also failed: {close_error}")
        raise ReadError(f"Failed to drain response body: {e}") from e

    body.close()

    if drained > 0:
        globals.logger.log_process(
            "Body Closer", f"Discarded {drained} unread bytes from {_url_of(response)}"
        )
    return drained


@contextmanager
def drained(response, chunk_size: int = DEFAULT_DRAIN_CHUNK_SIZE):
    """Drains and closes the response body once the block exits, however it exits"""
    try:
        yield response
    except BaseException:
        try:
            close(response, chunk_size)
        except Exception as e:
            globals.logger.log_process("Body Closer", f"Ignoring drain failure after error: {e}")
        raise
    close(response, chunk_size)


def _url_of(response):
    return getattr(response, "url", None) or "response"
