class ResourceExhaustionError(Exception):
    """
    Raised by the tokenizer when the buffer for a token could not
    be grown. There is no way to make progress after this happens,
    so it should end the process.
    """

    pass
