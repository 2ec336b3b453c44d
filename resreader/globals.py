from .output_logger import OutputLogger
from .reader_options import ReaderOptions

logger = OutputLogger("resreader")


def init_logger(options: ReaderOptions):
    global logger
    if options.custom_logger is not None:
        logger = options.custom_logger
    elif options.output_logger_level is not None:
        logger.set_log_level(options.output_logger_level)
