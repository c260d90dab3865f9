from __future__ import annotations

import csv
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from csvwordfreq.constants import DELIMITER, TARGET_COLUMN
from csvwordfreq.logger import counter_logger as logging
from csvwordfreq.tokenizer import clean_token, split_row


@dataclass
class FileCount:
  path: str
  counts: Counter[str] = field(default_factory=Counter)
  # wall-clock time of the scanning loop only, open/close excluded
  loop_time: float = 0.0
  ok: bool = True
  rows: int = 0
  skipped: int = 0


def _plain_rows(file, delimiter: str) -> Iterable[list[str]]:
  for line in file:
    yield split_row(line.rstrip("\n"), delimiter)


def count_file(path: str, column: int = TARGET_COLUMN, delimiter: str = DELIMITER,
               quoted: bool = False) -> FileCount:
  # the csv module wants to see the raw line endings, the plain split only breaks on \n
  newline = "" if quoted else "\n"
  try:
    file = open(path, "r", encoding="utf-8", errors="ignore", newline=newline)
  except OSError as e:
    logging.error(f"Could not open file: {path} ({e.strerror})")
    return FileCount(path=path, ok=False)

  result = FileCount(path=path)
  with file:
    loop_start = time.perf_counter()
    rows = csv.reader(file, delimiter=delimiter) if quoted else _plain_rows(file, delimiter)

    try:
      # the first line is always a header
      next(rows, None)

      for columns in rows:
        result.rows += 1
        if len(columns) <= column:
          result.skipped += 1
          continue
        token = clean_token(columns[column])
        if token:
          result.counts[token] += 1
    except (csv.Error, OSError) as e:
      # a file that breaks halfway contributes nothing
      logging.error(f"Could not read file: {path} ({e})")
      return FileCount(path=path, ok=False)

    result.loop_time = time.perf_counter() - loop_start

  if result.skipped:
    logging.debug(f"{path}: skipped {result.skipped} of {result.rows} rows with at most {column} fields")
  return result


def merge_counts(total: Counter[str], local: Mapping[str, int]) -> Counter[str]:
  """Add the counts of `local` into `total` and hand `total` back."""
  for word, count in local.items():
    total[word] += count
  return total
