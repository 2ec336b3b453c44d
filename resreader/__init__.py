from .html_parser import parse_html
from .interface_decoder import IDecoder
from .json_decoder import JsonDecoder
from .output_logger import LogLevel
from .output_logger import OutputLogger
from .reader_options import ReaderOptions
from .response_reader import ResponseReader
from .resreader_errors import DecodingError, InvalidInputError, ReadError, ResReaderError
from .stream_decompressor import StreamDecompressor
from .version import __version__

__all__ = [
    "DecodingError",
    "IDecoder",
    "InvalidInputError",
    "JsonDecoder",
    "LogLevel",
    "OutputLogger",
    "ReadError",
    "ReaderOptions",
    "ResReaderError",
    "ResponseReader",
    "StreamDecompressor",
    "parse_html",
    "__version__",
]
