from __future__ import annotations

import os
import platform
import sys
from typing import TYPE_CHECKING, Mapping, Optional, TextIO

from csvwordfreq.constants import TOP_N

if TYPE_CHECKING:
  from csvwordfreq.walker import FileResult, RunStats


def most_frequent(counts: Mapping[str, int]) -> tuple[int, list[str]]:
  """
  Highest count in `counts` and the words sharing it, sorted alphabetically.

  A maximum of 1 or less means the file has no duplicate words, and the word
  list comes back empty. This also holds for a file whose only word occurs
  once.
  """
  max_freq = max(counts.values(), default=0)
  if max_freq <= 1:
    return max_freq, []
  return max_freq, sorted(w for w, c in counts.items() if c == max_freq)


def top_words(counts: Mapping[str, int], n: int = TOP_N) -> list[tuple[str, int]]:
  # highest count first, equal counts alphabetically
  return sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:n]


def max_workers() -> int:
  try:
    return len(os.sched_getaffinity(0))
  except AttributeError:
    # not available on macOS and Windows
    return os.cpu_count() or 1


class Reporter:
  """Writes the human readable report, one line at a time."""

  def __init__(self, out: Optional[TextIO] = None, top_n: int = TOP_N):
    self.out = out if out is not None else sys.stdout
    self.top_n = top_n

  def line(self, text: str = "") -> None:
    print(text, file=self.out)

  def banner(self) -> None:
    self.line("**** Sequential Word Frequency Counter ****")

  def system_info(self) -> None:
    self.line("System Info:")
    self.line(f"  - Available processors: {os.cpu_count() or 1}")
    self.line(f"  - Max available workers: {max_workers()}")
    self.line(f"  - Runtime: {platform.python_implementation()} {platform.python_version()}")

  def file_done(self, result: FileResult) -> None:
    count = result.count
    if count.ok:
      self.line(f"       Inner loop time for {count.path}: {count.loop_time:.6f} seconds")

    max_freq, words = most_frequent(count.counts)
    if not words:
      self.line(f"File: {result.name} -> No duplicate words.")
    else:
      self.line(f"File: {result.name} -> Most frequent word(s) (count: {max_freq}): {', '.join(words)}")

    self.line(f"  Execution time for {result.name}: {result.elapsed:.4f} seconds")

  def summary(self, stats: RunStats) -> None:
    self.line()
    self.line(f"Processed {stats.file_count} files.")
    self.line(f"Unique words: {len(stats.total)}")
    self.line(f"Execution time: {stats.elapsed:.6f} seconds")

  def top(self, stats: RunStats) -> None:
    self.line()
    self.line(f"Top {self.top_n} most frequent words:")
    for word, count in top_words(stats.total, self.top_n):
      self.line(f"{word} : {count}")

  def benchmark(self, stats: RunStats) -> None:
    self.line()
    self.line("**** Benchmark Summary ****")
    self.line(f"Total files processed: {stats.file_count}")
    self.line(f"Unique words overall: {len(stats.total)}")
    self.line(f"Total execution time: {stats.elapsed:.4f} seconds")
    if stats.slowest_file is None:
      self.line("Slowest file: none")
    else:
      self.line(f"Slowest file: {stats.slowest_file} ({stats.slowest_time:.4f} seconds)")
    self.line(f"Files that could not be opened: {len(stats.failed)}")

  def finish(self, stats: RunStats) -> None:
    self.summary(stats)
    self.top(stats)
    self.benchmark(stats)
    self.line()
    self.line("Sequential execution completed")
