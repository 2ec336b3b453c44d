from typing import Any, Dict, Optional

from .output_logger import LogLevel, OutputLogger
from .resreader_errors import InvalidInputError

DEFAULT_DRAIN_CHUNK_SIZE = 64 * 1024
DEFAULT_HTML_FEATURES = "html.parser"


class ReaderOptions:
    """
    An object of properties for configuring how response bodies are read
    Sizes are in bytes
    """

    def __init__(
            self,
            drain_chunk_size: int = DEFAULT_DRAIN_CHUNK_SIZE,
            html_features: str = DEFAULT_HTML_FEATURES,
            custom_logger: Optional[OutputLogger] = None,
            output_logger_level: Optional[LogLevel] = LogLevel.WARNING,
    ):
        if not isinstance(drain_chunk_size, int) or isinstance(drain_chunk_size, bool) or drain_chunk_size <= 0:
            raise InvalidInputError(
                "ReaderOptions.drain_chunk_size must be a positive int"
            )
        if not isinstance(html_features, str) or not html_features:
            raise InvalidInputError(
                "ReaderOptions.html_features must be a non-empty str"
            )
        if output_logger_level is not None and not isinstance(output_logger_level, LogLevel):
            raise InvalidInputError(
                "ReaderOptions.output_logger_level must be a LogLevel"
            )
        self.drain_chunk_size = drain_chunk_size
        self.html_features = html_features
        self.custom_logger = custom_logger
        self.output_logger_level = output_logger_level

    def get_logging_copy(self) -> Dict[str, Any]:
        logging_copy: Dict[str, Any] = {}
        if self.drain_chunk_size != DEFAULT_DRAIN_CHUNK_SIZE:
            logging_copy["drain_chunk_size"] = self.drain_chunk_size
        if self.html_features != DEFAULT_HTML_FEATURES:
            logging_copy["html_features"] = self.html_features
        if self.custom_logger is not None:
            logging_copy["custom_logger"] = "SET"
        if self.output_logger_level is not None and self.output_logger_level != LogLevel.WARNING:
            logging_copy["output_logger_level"] = self.output_logger_level.name
        return logging_copy
