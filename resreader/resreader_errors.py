class ResReaderError(Exception):
    pass


class InvalidInputError(ResReaderError, ValueError):
    pass


class DecodingError(ResReaderError):
    pass


class ReadError(ResReaderError, IOError):
    pass
