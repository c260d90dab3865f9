from csvwordfreq.config import Config, ConfigError
from csvwordfreq.counter import FileCount, count_file, merge_counts
from csvwordfreq.report import Reporter, most_frequent, top_words
from csvwordfreq.tokenizer import clean_token, split_row
from csvwordfreq.walker import DataDirError, FileResult, RunStats, walk

__version__ = "0.1.0"

__all__ = [
  "Config", "ConfigError", "DataDirError", "FileCount", "FileResult",
  "Reporter", "RunStats", "clean_token", "count_file", "merge_counts",
  "most_frequent", "split_row", "top_words", "walk",
]
