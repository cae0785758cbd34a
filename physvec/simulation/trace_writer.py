import logging
import warnings
from dataclasses import dataclass
from itertools import count
from pathlib import Path
from typing import IO, Optional

from physvec.config.settings import TRACE_BASE_PATH


@dataclass(kw_only=True)
class TraceWriterConfig:
    """Configuration settings for initializing a TraceWriter.

    Attributes:
        trace_name (str): File name of the trace, without the ``.csv`` suffix.
        base_path (Path, optional): Directory the trace goes to. Defaults to ``TRACE_BASE_PATH``.
        overwrite_existing (bool, optional): Whether to overwrite an existing trace with same name. Defaults to False.
    """

    trace_name: str
    base_path: Path = TRACE_BASE_PATH
    overwrite_existing: bool = False


class TraceWriter:
    """Writes one scalar per line, the format simulation traces are compared in."""

    def __init__(self, trace_configs: TraceWriterConfig):
        self.logger = logging.getLogger(__name__)
        self.trace_configs = trace_configs
        self.path = self.resolve_path(trace_configs)
        self.file: Optional[IO] = self.create_file(self.path)

    def resolve_path(self, trace_configs: TraceWriterConfig) -> Path:
        base_path = Path(trace_configs.base_path)
        trace_path = base_path / f"{trace_configs.trace_name}.csv"

        if trace_path.exists() and not trace_configs.overwrite_existing:
            for i in count(1):
                candidate = base_path / f"{trace_configs.trace_name}_{i}.csv"
                if not candidate.exists():
                    warnings.warn(f"Trace file already exists. Saving as {candidate.name}")
                    return candidate
        return trace_path

    def create_file(self, trace_path: Path) -> IO:
        try:
            trace_path.parent.mkdir(parents=True, exist_ok=True)
            file = open(trace_path, "w")
        except OSError as e:
            self.logger.error(f"Failed to open trace file {trace_path}: {e}")
            raise
        self.logger.info("Directing output to %s", trace_path)
        return file

    def write_value(self, value: float):
        """Append a single value to the trace."""
        if self.file is None or self.file.closed:
            raise ValueError(f"Trace file {self.path} is closed")
        self.file.write(f"{value!r}\n")

    def close(self):
        if self.file is not None and not self.file.closed:
            self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
