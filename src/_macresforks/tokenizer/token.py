from dataclasses import dataclass


@dataclass
class Token:
    """
    A single path read from a null-delimited stream.
    """

    value: bytes
    terminated: bool = True

    def serialize(self):
        """
        :returns: The wire form of the token, that is, the value followed
            by exactly one null byte regardless of whether the token was
            terminated in the input.
        """
        return self.value + b"\0"
