"""
Decides whether a path names a resource fork file, ie. an AppleDouble file
such as "dir/._name", for which the primary file "dir/name" exists.

Paths are handled as raw bytes, split on "/" the same way the POSIX
dirname(3) and basename(3) functions split them.
"""
import logging
import os

logger = logging.getLogger(__name__)

SEPARATOR = b"/"
CURRENT_DIRECTORY = b"."
RESOURCE_FORK_PREFIX = b"._"


def split_path(path):
    """
    Split a path into its directory and base name.

    >>> split_path(b"a/b/._c")
    (b'a/b', b'._c')
    >>> split_path(b"._c")
    (b'.', b'._c')
    >>> split_path(b"/a/b/")
    (b'/a', b'b')

    :param path: The path as a byte string.
    :returns: The tuple (directory, base_name), both new byte strings.
    """
    if not path:
        return CURRENT_DIRECTORY, CURRENT_DIRECTORY

    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR, SEPARATOR

    sep_index = stripped.rfind(SEPARATOR)
    if sep_index == -1:
        return CURRENT_DIRECTORY, bytes(stripped)

    base_name = stripped[sep_index + 1 :]
    directory = stripped[:sep_index].rstrip(SEPARATOR)
    if not directory:
        directory = SEPARATOR
    return bytes(directory), bytes(base_name)


def is_resource_fork_name(base_name):
    return len(base_name) >= 2 and base_name.startswith(RESOURCE_FORK_PREFIX)


def primary_path(path):
    """
    :returns: The path of the primary file belonging to the resource fork
        at the given path, or None if the base name does not start with "._".
    """
    directory, base_name = split_path(path)
    if not is_resource_fork_name(base_name):
        return None
    return directory + SEPARATOR + base_name[len(RESOURCE_FORK_PREFIX) :]


def path_exists(path):
    """
    Whether anything exists at path. Failing to check, for instance due to
    missing permissions, counts as not existing.
    """
    try:
        return os.access(path, os.F_OK)
    except (OSError, ValueError) as err:
        logger.debug("Could not check existence of %r: %s", path, err)
        return False


def is_verified_resource_fork(path, exists=path_exists):
    """
    :param path: A path as a byte string, it is not modified.
    :param exists: Function used to check whether the primary file exists.
        It is only called for paths whose base name starts with "._".
    :returns: True if path looks like a resource fork and its primary file
        exists.
    """
    candidate = primary_path(path)
    if candidate is None:
        logger.debug("Rejected %r: not named like a resource fork", path)
        return False

    if candidate.endswith(SEPARATOR):
        # "._" alone has no primary file name, "dir/" would match dir itself
        logger.debug("Rejected %r: empty primary file name", path)
        return False

    if not exists(candidate):
        logger.debug("Rejected %r: %r does not exist", path, candidate)
        return False

    logger.debug("Accepted %r: found %r", path, candidate)
    return True
