"""fsguard - defensive, error-typed helpers over the local filesystem."""

from fsguard.core import (
    ANY_EXTENSION,
    DEFAULT_FILE_MODE,
    HOME_SHORTHAND,
    ErrorKind,
    FileTooLargeError,
    FsGuardError,
    HomeDirectoryError,
    NotDirectoryError,
    NotFileError,
    PathType,
    append_file,
    classify_path,
    home_directory,
    is_empty_directory,
    list_files,
    list_subdirectories,
    matches_any_type,
    read_file,
    remove_file,
    remove_if_empty,
    resolve_absolute,
    write_file,
)

__version__ = "0.1.0"

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
