from typing import Callable, Optional, Tuple, TypeVar

from bs4 import BeautifulSoup

from . import globals
from .interface_decoder import IDecoder
from .reader_options import ReaderOptions
from .response_reader import ResponseReader
from .stream_decompressor import stream_for as _stream_for

T = TypeVar("T")
O = TypeVar("O")

__instance = ResponseReader()


def configure(options: Optional[ReaderOptions] = None):
    """
    Replaces the global ResponseReader with one built from the given options

    :param options: The ReaderOptions object used to configure reading
    """
    global __instance
    if options is None:
        options = ReaderOptions()

    globals.init_logger(options)
    globals.logger.log_process("Configure", f"Options {options.get_logging_copy()}")
    __instance = ResponseReader(options)


def stream_for(response):
    """
    Returns a readable stream over the decoded body. The caller owns it,
    and must release the response with close()
    """
    return _stream_for(response)


def read_body(response) -> bytes:
    """
    Reads the whole decoded body of the response, then releases it

    :param response: A completed response, e.g. a requests.Response fetched with stream=True
    :return: The body with any gzip or br content encoding reversed
    """
    return __instance.read_body(response)


def parse(response, parser: Callable[..., T]) -> T:
    """
    Parses the decoded body with parser, then releases it

    :param response: A completed response
    :param parser: Called with a readable stream over the decoded body
    :return: Whatever parser returns
    """
    return __instance.parse(response, parser)


def parse_with_error(
    response, parser: Callable[..., Tuple[Optional[T], Optional[Exception]]]
) -> Optional[T]:
    """
    Parses the decoded body with a parser returning (value, error), then releases it

    :param response: A completed response
    :param parser: Called with a readable stream over the decoded body
    :return: The parsed value; a returned error is raised instead
    """
    return __instance.parse_with_error(response, parser)


def parse_doc(response) -> BeautifulSoup:
    """
    Parses the decoded body as an HTML document, then releases it

    :param response: A completed response
    :return: The BeautifulSoup document tree
    """
    return __instance.parse_doc(response)


def decode(new_decoder: Callable[..., IDecoder], response, target: O) -> O:
    """
    Decodes the body into target with a decoder built over the decoded stream,
    then releases it

    :param new_decoder: Called with the body stream, returns an object with decode(target)
    :param response: A completed response
    :param target: The object to populate
    :return: target, once populated
    """
    return __instance.decode(new_decoder, response, target)


def decode_into(new_decoder: Callable[..., IDecoder], response, target) -> None:
    """
    Same as decode, for callers already holding a reference to target
    """
    __instance.decode_into(new_decoder, response, target)


def close(response) -> int:
    """
    Drains and closes the raw body of the response

    :param response: A completed response
    :return: The number of unread bytes that were discarded
    """
    return __instance.close(response)
