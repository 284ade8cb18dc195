"""Reading saved snapshots and writing reports to files or CI outputs."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Union

from .exceptions import ConfigurationError, FileAccessError, InvalidOutputSpecError
from .formatters.formats import FORMATS, Format
from .logging_config import get_logger
from .snapshot.models import ArtifactSnapshot, snapshots_from_json

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutputTarget:
    """Where a report goes: ``format`` plus a filename or output key.

    ``format`` is ``None`` when the user gave only a key and the command's
    default format should be used.
    """

    format: Optional[Format]
    key: str

    def with_default(self, fmt: Union[Format, str]) -> "OutputTarget":
        return OutputTarget(format=self.format or Format(fmt), key=self.key)


def parse_output(value: object, param_name: str, require_format: bool) -> OutputTarget:
    """Parse a ``format:key`` specification such as ``markdown:report.md``.

    Raises:
        InvalidOutputSpecError: If the specification is malformed
    """
    if not isinstance(value, str):
        raise InvalidOutputSpecError(
            f"{param_name} must be a string in the form 'format:key'", param_name
        )

    if ":" not in value:
        if require_format:
            raise InvalidOutputSpecError(f"{param_name} must be in the form 'format:key'", param_name)
        return OutputTarget(format=None, key=value)

    fmt, key = value.split(":", 1)
    if fmt not in FORMATS:
        raise InvalidOutputSpecError(
            f"Invalid format for {param_name}: {fmt}. Supported formats: {','.join(FORMATS)}",
            param_name,
        )
    if not key:
        raise InvalidOutputSpecError(f"{param_name} key must not be empty", param_name)

    return OutputTarget(format=Format(fmt), key=key)


def read_snapshot_file(path: Union[str, Path]) -> List[ArtifactSnapshot]:
    """Load a snapshot previously written by ``analyze --format=json``.

    Raises:
        FileAccessError: If the file cannot be read
        SnapshotFormatError: If the content is not a snapshot list
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e))

    snapshots = snapshots_from_json(text, source=str(path))
    logger.debug("Loaded %d artifact(s) from %s", len(snapshots), path)
    return snapshots


def write_file(content: str, filename: str, cwd: Union[str, Path]) -> Path:
    """Write ``content`` to ``filename`` (resolved against ``cwd``)."""
    dst = Path(cwd) / filename
    try:
        dst.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(dst, e.strerror or str(e))
    logger.info("Wrote %s", dst)
    return dst


def write_github_output(
    content: str,
    key: str,
    env: Optional[Mapping[str, str]] = None,
    delimiter: str = "EOF",
) -> None:
    """Append a multiline step output to the file named by ``GITHUB_OUTPUT``.

    Raises:
        ConfigurationError: If ``GITHUB_OUTPUT`` is not set
    """
    env = os.environ if env is None else env
    target = env.get("GITHUB_OUTPUT")
    if not target:
        raise ConfigurationError(
            "GITHUB_OUTPUT is not set; --output-github only works inside GitHub Actions",
            details={"key": key},
        )

    try:
        with open(target, "a", encoding="utf-8") as f:
            f.write(f"{key}<<{delimiter}\n{content}\n{delimiter}\n")
    except OSError as e:
        raise FileAccessError(Path(target), e.strerror or str(e))
    logger.info("Wrote GitHub output %s", key)
