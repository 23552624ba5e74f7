"""Core filesystem helpers: classification, path resolution, listing, and file I/O."""

from .directory import (
    ANY_EXTENSION,
    is_empty_directory,
    list_files,
    list_subdirectories,
    remove_if_empty,
)
from .errors import (
    ErrorKind,
    FileTooLargeError,
    FsGuardError,
    HomeDirectoryError,
    NotDirectoryError,
    NotFileError,
)
from .files import DEFAULT_FILE_MODE, append_file, read_file, remove_file, write_file
from .path_type import PathType, classify_path, matches_any_type
from .paths import HOME_SHORTHAND, home_directory, resolve_absolute

__all__ = [
    "ANY_EXTENSION",
    "DEFAULT_FILE_MODE",
    "HOME_SHORTHAND",
    "ErrorKind",
    "FileTooLargeError",
    "FsGuardError",
    "HomeDirectoryError",
    "NotDirectoryError",
    "NotFileError",
    "PathType",
    "append_file",
    "classify_path",
    "home_directory",
    "is_empty_directory",
    "list_files",
    "list_subdirectories",
    "matches_any_type",
    "read_file",
    "remove_file",
    "remove_if_empty",
    "resolve_absolute",
    "write_file",
]
