import macresforks.version
from _macresforks.filtering import filter_resource_forks
from _macresforks.tokenizer import NullTerminatedTokenizer, ResourceExhaustionError, Token
from _macresforks.verifier import is_verified_resource_fork, primary_path, split_path

__version__ = macresforks.version.version

__all__ = [
    "NullTerminatedTokenizer",
    "ResourceExhaustionError",
    "Token",
    "filter_resource_forks",
    "is_verified_resource_fork",
    "primary_path",
    "split_path",
]
