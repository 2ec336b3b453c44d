# pylint: disable=unused-argument
class IDecoder:
    """
    A decoder reads from the stream it was constructed with and
    populates a caller-supplied target. It raises on failure.
    """

    def decode(self, target) -> None:
        pass
