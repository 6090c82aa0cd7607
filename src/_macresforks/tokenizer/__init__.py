"""
In this module, a tokenizer reads a byte stream consisting of paths that are
each terminated by a single null byte, as produced by `find -print0`, and
generates one Token per path.

The stream is read one byte at a time without any look-back, so it can be a
pipe. The last path in the stream does not need to be terminated: reaching the
end of the stream after reading at least one byte ends the token the same way
a null byte does. Two consecutive null bytes give an empty token.
"""

from .errors import ResourceExhaustionError
from .null_terminated_tokenizer import NullTerminatedTokenizer
from .token import Token

__all__ = ["NullTerminatedTokenizer", "ResourceExhaustionError", "Token"]
