import logging

from _macresforks.tokenizer import NullTerminatedTokenizer
from _macresforks.verifier import is_verified_resource_fork

logger = logging.getLogger(__name__)


def filter_resource_forks(in_stream, out_stream, verify=is_verified_resource_fork):
    """
    Copies each null terminated path in in_stream that is a verified resource
    fork to out_stream, in the order read, each followed by a null byte.

    ie. with "/tmp/foo" existing,
    filter_resource_forks(BytesIO(b"/tmp/foo\\0/tmp/._foo\\0"), out)
    writes b"/tmp/._foo\\0" to out.

    :param in_stream: Byte stream of null terminated paths.
    :param out_stream: Byte stream that accepted paths are written to. It is
        flushed after every path.
    :param verify: Predicate deciding whether a path is written.
    :returns: The number of paths written.
    """
    read = 0
    written = 0
    for token in NullTerminatedTokenizer(in_stream):
        read += 1
        if verify(token.value):
            out_stream.write(token.serialize())
            out_stream.flush()
            written += 1

    logger.debug("Read %d paths, wrote %d resource forks", read, written)
    return written
