# maintenance_tool/utils/file_utils.py
"""File operation utilities"""

import hashlib
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple


def calculate_file_checksum(file_path: Path,
                            algorithm: str = "sha256",
                            chunk_size: int = 8192) -> str:
    """
    Calculate file checksum

    Args:
        file_path: Path to file
        algorithm: Hash algorithm (sha256, md5, sha1)
        chunk_size: Read chunk size

    Returns:
        Hex digest string
    """
    hash_func = hashlib.new(algorithm)

    with open(file_path, 'rb') as f:
        while chunk := f.read(chunk_size):
            hash_func.update(chunk)

    return hash_func.hexdigest()


def ensure_directory(path: Path) -> Path:
    """Create directory and any missing parents"""
    path.mkdir(parents=True, exist_ok=True)
    return path


@contextmanager
def staging_directory(parent: Path, prefix: str) -> Iterator[Path]:
    """Temporary directory inside ``parent``, removed on exit

    Staging on the same filesystem as the destination keeps ``os.replace``
    atomic for each file.
    """
    staging = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))
    try:
        yield staging
    finally:
        shutil.rmtree(staging, ignore_errors=True)


def install_files(files: Dict[str, Path],
                  destination: Path,
                  prefix: str,
                  clean: bool = False) -> Tuple[Dict[str, Path], List[Path]]:
    """Copy files into ``destination`` all-or-nothing

    Every source is first copied into a staging directory; only when all
    copies succeed are they moved into place, in the order given.

    Args:
        files: Mapping of destination file name to source path
        destination: Existing target directory
        prefix: Staging directory name prefix
        clean: Remove every other entry of ``destination`` before the swap

    Returns:
        Tuple of (destination file name to installed path, removed paths)
    """
    installed = {}
    removed = []

    with staging_directory(destination, prefix) as staging:
        staged = {}
        for name, source in files.items():
            staged[name] = Path(shutil.copy2(source, staging / name))

        if clean:
            removed = clear_directory(destination, keep=[staging.name])

        for name, staged_path in staged.items():
            target = destination / name
            os.replace(staged_path, target)
            installed[name] = target

    return installed, removed


def clear_directory(directory: Path, keep: Optional[List[str]] = None) -> List[Path]:
    """Remove directory entries except those named in ``keep``

    Returns:
        Removed paths
    """
    keep = set(keep or [])
    removed = []

    for entry in sorted(directory.iterdir()):
        if entry.name in keep:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
        removed.append(entry)

    return removed


def is_writable_directory(path: Path) -> bool:
    """Check whether files can be created in ``path``"""
    try:
        test_file = path / ".permission_test"
        test_file.touch()
        test_file.unlink()
        return True
    except OSError:
        return False
