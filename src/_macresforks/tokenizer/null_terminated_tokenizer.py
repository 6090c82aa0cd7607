from _macresforks.tokenizer.errors import ResourceExhaustionError
from _macresforks.tokenizer.token import Token

INITIAL_CAPACITY = 16


class NullTerminatedTokenizer:
    """
    Reads null terminated byte strings from a byte stream, one byte at a
    time. The stream is never seeked, so it may be a pipe.

    >>> import io
    >>> tokens = NullTerminatedTokenizer(io.BytesIO(b"a\\0b"))
    >>> [t.value for t in tokens]
    [b'a', b'b']

    """

    def __init__(self, stream):
        """
        :param stream: A byte stream containing null terminated paths.
        """
        self.stream = stream

    def __iter__(self):
        while True:
            token = self.read_token()
            if token is None:
                return
            yield token

    def read_token(self):
        """
        Read the next token from the stream.

        If the stream ends after some bytes have been read, those bytes are
        returned as a token with terminated=False and the following call
        returns None.

        :returns: The next Token, or None when the stream is exhausted.
        :raises ResourceExhaustionError: If the token buffer could not be
            grown.
        """
        buffer = bytearray(INITIAL_CAPACITY)
        length = 0
        terminated = False
        try:
            while True:
                read_char = self.stream.read(1)
                if not read_char:
                    if length == 0:
                        return None
                    break
                if read_char == b"\0":
                    terminated = True
                    break
                buffer[length] = read_char[0]
                length += 1
                if length == len(buffer):
                    buffer.extend(bytes(len(buffer)))
            del buffer[length:]
        except MemoryError as err:
            raise ResourceExhaustionError(
                f"Could not grow token buffer beyond {len(buffer)} bytes"
            ) from err

        return Token(bytes(buffer), terminated)
