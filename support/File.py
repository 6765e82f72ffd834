from __future__ import annotations

import mimetypes
import os
import shutil
import stat
import sys
from pathlib import Path, PurePath
from typing import Iterator, List, Optional, Union

if sys.platform != 'win32':
    import fcntl

from support.Config import settings
from support.Exceptions import FileNotFoundException, FilesystemException
from support.Log import get_logger
from support.Types import PathLike, PathList

logger = get_logger('support.file')


class File:
    """Filesystem helpers working on plain paths.

    Errors are raised, never returned: a missing source path raises
    FileNotFoundException and any other OS failure raises
    FilesystemException. The only exceptions are delete and
    delete_directory, which are best effort and report success as a bool.
    """

    @staticmethod
    def exists(path: PathLike) -> bool:
        """Determine if a file or directory exists."""
        return os.path.exists(path)

    @staticmethod
    def missing(path: PathLike) -> bool:
        """Determine if a file or directory is missing."""
        return not File.exists(path)

    @staticmethod
    def get(path: PathLike) -> str:
        """Get the contents of a file."""
        File._ensure_exists(path)
        try:
            return Path(path).read_text(encoding=settings.FILE_ENCODING)
        except OSError as e:
            raise File._error("read", path, e) from e

    @staticmethod
    def put(path: PathLike, contents: Union[str, bytes], lock: bool = False) -> int:
        """Write the contents of a file, returning the number of bytes written.

        With ``lock`` an exclusive advisory lock (flock) is held while the
        file is truncated and written. Locking is POSIX only.
        """
        data = contents.encode(settings.FILE_ENCODING) if isinstance(contents, str) else bytes(contents)
        try:
            if lock:
                File._write_locked(path, data)
            else:
                Path(path).write_bytes(data)
        except OSError as e:
            raise File._error("write", path, e) from e

        logger.debug("File written", {"path": os.fspath(path), "bytes": len(data)})
        return len(data)

    @staticmethod
    def append(path: PathLike, contents: Union[str, bytes]) -> int:
        """Append to a file, returning the number of bytes written."""
        data = contents.encode(settings.FILE_ENCODING) if isinstance(contents, str) else bytes(contents)
        try:
            with open(path, 'ab') as f:
                f.write(data)
        except OSError as e:
            raise File._error("append to", path, e) from e

        logger.debug("File appended", {"path": os.fspath(path), "bytes": len(data)})
        return len(data)

    @staticmethod
    def delete(paths: PathList) -> bool:
        """Delete the file(s) at the given path(s).

        Missing paths are skipped. Returns False if any file could not be
        removed.
        """
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]

        success = True
        for path in paths:
            if not os.path.lexists(path):
                continue
            try:
                os.unlink(path)
                logger.debug("File deleted", {"path": os.fspath(path)})
            except OSError as e:
                logger.warning("Unable to delete file", {"path": os.fspath(path), "error": str(e)})
                success = False

        return success

    @staticmethod
    def move(path: PathLike, target: PathLike) -> bool:
        """Move a file to a new location."""
        File._ensure_exists(path)
        try:
            shutil.move(os.fspath(path), os.fspath(target))
        except OSError as e:
            raise File._error("move", path, e) from e
        return True

    @staticmethod
    def copy(path: PathLike, target: PathLike) -> bool:
        """Copy a file to a new location."""
        File._ensure_exists(path)
        try:
            shutil.copy2(path, target)
        except OSError as e:
            raise File._error("copy", path, e) from e
        return True

    @staticmethod
    def size(path: PathLike) -> int:
        """Get the file size in bytes."""
        return File._stat(path).st_size

    @staticmethod
    def extension(path: PathLike) -> str:
        """Get the file's extension."""
        return PurePath(path).suffix[1:]

    @staticmethod
    def name(path: PathLike) -> str:
        """Get the file name from a path, without the extension."""
        return PurePath(path).stem

    @staticmethod
    def basename(path: PathLike) -> str:
        """Get the file name from a path, including the extension."""
        return PurePath(path).name

    @staticmethod
    def dirname(path: PathLike) -> str:
        """Get the directory name from a path."""
        return str(PurePath(path).parent)

    @staticmethod
    def type(path: PathLike) -> str:
        """Get the file type: file, dir, link, fifo, char, block, socket or unknown."""
        if not os.path.lexists(path):
            raise FileNotFoundException(path)
        try:
            mode = os.lstat(path).st_mode
        except OSError as e:
            raise File._error("stat", path, e) from e

        if stat.S_ISLNK(mode):
            return 'link'
        if stat.S_ISREG(mode):
            return 'file'
        if stat.S_ISDIR(mode):
            return 'dir'
        if stat.S_ISFIFO(mode):
            return 'fifo'
        if stat.S_ISCHR(mode):
            return 'char'
        if stat.S_ISBLK(mode):
            return 'block'
        if stat.S_ISSOCK(mode):
            return 'socket'
        return 'unknown'

    @staticmethod
    def mime_type(path: PathLike) -> str:
        """Get the MIME type of a given file, guessed from its name."""
        File._ensure_exists(path)
        if os.path.isdir(path):
            return 'directory'

        mime_type, _ = mimetypes.guess_type(os.fspath(path))
        return mime_type or 'application/octet-stream'

    @staticmethod
    def last_modified(path: PathLike) -> int:
        """Get the last modification time of a file as a Unix timestamp."""
        return int(File._stat(path).st_mtime)

    @staticmethod
    def make_directory(path: PathLike, mode: Optional[int] = None, recursive: bool = False, force: bool = False) -> bool:
        """Create a directory.

        With ``force`` an existing directory counts as success instead of
        an error.
        """
        if mode is None:
            mode = settings.DIRECTORY_MODE

        if force and os.path.isdir(path):
            return True

        try:
            if recursive:
                os.makedirs(path, mode)
            else:
                os.mkdir(path, mode)
        except OSError as e:
            raise File._error("create directory", path, e) from e

        logger.debug("Directory created", {"path": os.fspath(path)})
        return True

    @staticmethod
    def delete_directory(directory: PathLike, preserve: bool = False) -> bool:
        """Delete a directory and everything in it, depth first.

        Best effort and not atomic: a failure on one entry is logged and
        the remaining entries are still removed. Returns False if anything
        was left behind. ``preserve`` keeps the directory itself.
        """
        path = Path(directory)
        if not path.exists():
            return True
        if not path.is_dir():
            return False

        try:
            entries = list(path.iterdir())
        except OSError as e:
            logger.warning("Unable to list directory", {"path": str(path), "error": str(e)})
            return False

        success = True
        for entry in entries:
            if entry.is_dir() and not entry.is_symlink():
                success = File.delete_directory(entry) and success
            else:
                success = File.delete(entry) and success

        if not preserve:
            try:
                path.rmdir()
                logger.debug("Directory deleted", {"path": str(path)})
            except OSError as e:
                logger.warning("Unable to delete directory", {"path": str(path), "error": str(e)})
                success = False

        return success

    @staticmethod
    def clean_directory(directory: PathLike) -> bool:
        """Empty the specified directory of all files and folders."""
        return File.delete_directory(directory, preserve=True)

    @staticmethod
    def files(directory: PathLike, hidden: bool = False) -> List[str]:
        """Get the files directly inside a directory."""
        return [str(entry) for entry in File._entries(directory, hidden) if entry.is_file()]

    @staticmethod
    def directories(directory: PathLike, hidden: bool = False) -> List[str]:
        """Get the directories directly inside a directory."""
        return [str(entry) for entry in File._entries(directory, hidden) if entry.is_dir()]

    @staticmethod
    def all_files(directory: PathLike, hidden: bool = False) -> List[str]:
        """Get all of the files from the given directory (recursive)."""
        return sorted(
            os.path.join(root, name)
            for root, _, names in File._walk(directory, hidden)
            for name in names
            if hidden or not name.startswith('.')
        )

    @staticmethod
    def all_directories(directory: PathLike, hidden: bool = False) -> List[str]:
        """Get all of the directories within a given directory (recursive)."""
        return sorted(
            os.path.join(root, name)
            for root, names, _ in File._walk(directory, hidden)
            for name in names
        )

    # Helper methods
    @staticmethod
    def _ensure_exists(path: PathLike) -> None:
        if not os.path.exists(path):
            raise FileNotFoundException(path)

    @staticmethod
    def _stat(path: PathLike) -> os.stat_result:
        File._ensure_exists(path)
        try:
            return os.stat(path)
        except OSError as e:
            raise File._error("stat", path, e) from e

    @staticmethod
    def _error(action: str, path: PathLike, error: OSError) -> FilesystemException:
        if isinstance(error, FileNotFoundError):
            return FileNotFoundException(path)
        return FilesystemException(f"Unable to {action} {os.fspath(path)}: {error.strerror or error}")

    @staticmethod
    def _write_locked(path: PathLike, data: bytes) -> None:
        if sys.platform == 'win32':
            raise FilesystemException("File locking is not supported on Windows")

        # Opened for append so the file is only truncated once the lock is held
        with open(path, 'ab') as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                f.truncate(0)
                f.write(data)
                f.flush()
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    @staticmethod
    def _entries(directory: PathLike, hidden: bool) -> List[Path]:
        path = Path(directory)
        if not path.exists():
            raise FileNotFoundException(directory)
        if not path.is_dir():
            raise FilesystemException(f"Not a directory: {os.fspath(directory)}")

        try:
            return sorted(entry for entry in path.iterdir() if hidden or not entry.name.startswith('.'))
        except OSError as e:
            raise File._error("list", directory, e) from e

    @staticmethod
    def _walk(directory: PathLike, hidden: bool) -> Iterator[tuple[str, List[str], List[str]]]:
        File._entries(directory, hidden)

        for root, dirs, names in os.walk(directory):
            if not hidden:
                # Prune hidden directories so their contents are skipped too
                dirs[:] = [d for d in dirs if not d.startswith('.')]
            yield root, dirs, names
