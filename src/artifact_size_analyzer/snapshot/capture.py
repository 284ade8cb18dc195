"""Capture size snapshots by measuring the files of each configured artifact."""

import gzip
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

import brotli

from ..config import ArtifactConfig, SizeConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from .models import ArtifactSnapshot, FileEntry

logger = get_logger(__name__)

# Matches the defaults of common bundler size reporters
GZIP_LEVEL = 6


def _glob(root: Path, patterns: Iterable[str]) -> Set[str]:
    matches: Set[str] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if path.is_file():
                matches.add(path.relative_to(root).as_posix())
    return matches


def get_files(
    include: Iterable[str],
    exclude: Iterable[str],
    cwd: Union[str, Path],
) -> List[str]:
    """Expand include/exclude globs into a sorted list of relative file paths.

    Only regular files are returned.  Paths are POSIX-style and relative to
    ``cwd`` so snapshots taken on different machines stay comparable.
    """
    root = Path(cwd)
    result = _glob(root, include)
    if result:
        result -= _glob(root, exclude)
    return sorted(result)


def get_file_size(
    filename: str,
    cwd: Union[str, Path],
    gzip_enabled: bool = True,
    brotli_enabled: bool = True,
) -> FileEntry:
    """Measure raw, gzip and brotli sizes of one file.

    A disabled algorithm yields ``None`` for that metric.

    Raises:
        FileAccessError: If the file cannot be read
    """
    path = Path(filename)
    if not path.is_absolute():
        path = Path(cwd) / path

    try:
        content = path.read_bytes()
        size = path.stat().st_size
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e))

    gz_size: Optional[int] = None
    br_size: Optional[int] = None
    if gzip_enabled:
        gz_size = len(gzip.compress(content, compresslevel=GZIP_LEVEL, mtime=0))
    if brotli_enabled:
        br_size = len(brotli.compress(content))

    return FileEntry(filename=filename, size=size, gzip=gz_size, brotli=br_size)


def analyze_artifact(artifact: ArtifactConfig, cwd: Union[str, Path]) -> ArtifactSnapshot:
    """Measure every file of ``artifact`` and sum the per-file sizes."""
    filenames = get_files(artifact.include, artifact.exclude, cwd)
    logger.debug("Artifact %s matched %d file(s)", artifact.id, len(filenames))

    files = [
        get_file_size(name, cwd, gzip_enabled=artifact.gzip, brotli_enabled=artifact.brotli)
        for name in filenames
    ]

    snapshot = ArtifactSnapshot(
        id=artifact.id,
        name=artifact.name,
        files=files,
        size=sum(f.size for f in files),
        gzip=sum(f.gzip or 0 for f in files) if artifact.gzip else None,
        brotli=sum(f.brotli or 0 for f in files) if artifact.brotli else None,
    )
    logger.info("Measured %s: %d bytes in %d file(s)", artifact.id, snapshot.size, len(files))
    return snapshot


def analyze_artifacts(
    config: SizeConfig,
    cwd: Union[str, Path],
    workers: Optional[int] = None,
) -> List[ArtifactSnapshot]:
    """Measure all configured artifacts, one worker task per artifact.

    Results are returned in configuration order regardless of which
    artifact finishes first.
    """
    if not config.artifacts:
        return []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda a: analyze_artifact(a, cwd), config.artifacts))
