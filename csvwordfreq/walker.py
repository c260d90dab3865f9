from __future__ import annotations

import os
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Protocol

from csvwordfreq.config import Config
from csvwordfreq.counter import FileCount, count_file, merge_counts
from csvwordfreq.logger import walker_logger as logging


class DataDirError(OSError):
  """The input directory could not be opened. Nothing else is fatal."""

  def __init__(self, path: str, cause: OSError):
    super().__init__(cause.errno, cause.strerror, path)
    self.path = path
    self.cause = cause


@dataclass
class FileResult:
  name: str
  count: FileCount
  # whole file, including open and close
  elapsed: float


@dataclass
class RunStats:
  file_count: int = 0
  total: Counter[str] = field(default_factory=Counter)
  slowest_file: Optional[str] = None
  slowest_time: float = 0.0
  elapsed: float = 0.0
  failed: list[str] = field(default_factory=list)

  def add(self, result: FileResult) -> RunStats:
    self.file_count += 1
    # strictly slower only, the first file seen keeps a tie
    if self.slowest_file is None or result.elapsed > self.slowest_time:
      self.slowest_file = result.name
      self.slowest_time = result.elapsed
    if not result.count.ok:
      self.failed.append(result.count.path)
    merge_counts(self.total, result.count.counts)
    return self


class FileListener(Protocol):
  def file_done(self, result: FileResult) -> None: ...


def process_file(config: Config, directory: str, name: str) -> FileResult:
  path = os.path.join(directory, name)
  file_start = time.perf_counter()
  count = count_file(path, config.column, config.delimiter, config.quoted)
  return FileResult(name=name, count=count, elapsed=time.perf_counter() - file_start)


def walk(config: Config, listener: Optional[FileListener] = None,
         stats: Optional[RunStats] = None) -> RunStats:
  """
  Count every entry of `config.data_dir` in the order the filesystem lists
  them. Each file is reported to `listener` before it is merged into `stats`.
  """
  stats = stats if stats is not None else RunStats()
  total_start = time.perf_counter()

  try:
    entries = os.scandir(config.data_dir)
  except OSError as e:
    raise DataDirError(config.data_dir, e) from e

  logging.debug(f"Scanning {config.data_dir}, column {config.column}, delimiter {config.delimiter!r}")
  with entries:
    for entry in entries:
      result = process_file(config, config.data_dir, entry.name)
      if listener is not None:
        listener.file_done(result)
      stats.add(result)

  stats.elapsed = time.perf_counter() - total_start
  logging.debug(f"Done with {stats.file_count} files in {stats.elapsed:.6f} seconds")
  return stats
