from contextlib import closing, contextmanager
from typing import Callable, Optional, Tuple, TypeVar

from bs4 import BeautifulSoup

from . import body_closer
from .html_parser import parse_html
from .interface_decoder import IDecoder
from .reader_options import ReaderOptions
from .resreader_errors import ReadError, ResReaderError
from .stream_decompressor import check_response, stream_for

T = TypeVar("T")
O = TypeVar("O")


class ResponseReader:
    """
    Reads, parses and decodes response bodies.

    Every method drains and closes the response body exactly once before it
    returns or raises. A response must not be handed to two calls at once.
    """

    def __init__(self, options: Optional[ReaderOptions] = None):
        if options is None:
            options = ReaderOptions()
        self._options = options

    def read_body(self, response) -> bytes:
        """
        Reads the whole decoded body of the response

        :param response: A completed response exposing headers and a raw body
        :return: The body with any gzip or br content encoding reversed
        """
        with self._open(response) as stream:
            try:
                data = stream.read()
            except ResReaderError:
                raise
            except Exception as e:
                raise ReadError(f"Failed to read response body: {e}") from e
        return data if data is not None else b""

    def parse(self, response, parser: Callable[..., T]) -> T:
        """
        Runs the parser over the decoded body and returns what it returns.
        Exceptions raised by the parser propagate unchanged.
        """
        with self._open(response) as stream:
            return parser(stream)

    def parse_with_error(
        self, response, parser: Callable[..., Tuple[Optional[T], Optional[Exception]]]
    ) -> Optional[T]:
        """
        Runs a parser that reports failure as the second item of a (value, error)
        tuple. A returned error is raised as is.
        """
        with self._open(response) as stream:
            value, error = parser(stream)
        if error is not None:
            raise error
        return value

    def parse_doc(self, response) -> BeautifulSoup:
        features = self._options.html_features
        return self.parse_with_error(
            response, lambda stream: parse_html(stream, features)
        )

    def decode(self, new_decoder: Callable[..., IDecoder], response, target: O) -> O:
        """
        Builds a decoder over the decoded body and decodes into target.
        Exceptions raised by the decoder propagate unchanged.

        :param new_decoder: Called with the body stream, returns an object with decode(target)
        :param response: A completed response exposing headers and a raw body
        :param target: The object to populate
        :return: target, once populated
        """
        with self._open(response) as stream:
            new_decoder(stream).decode(target)
        return target

    def decode_into(self, new_decoder: Callable[..., IDecoder], response, target) -> None:
        self.decode(new_decoder, response, target)

    def close(self, response) -> int:
        return body_closer.close(response, self._options.drain_chunk_size)

    @contextmanager
    def _open(self, response):
        check_response(response)
        with body_closer.drained(response, self._options.drain_chunk_size):
            stream = stream_for(response)
            if stream is response.raw:
                yield stream
            else:
                with closing(stream):
                    yield stream
