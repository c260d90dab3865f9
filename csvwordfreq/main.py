from __future__ import annotations

import argparse
from typing import Optional, Sequence, TextIO

from csvwordfreq.config import LOG_LEVELS, ConfigError, load_config
from csvwordfreq.constants import CONFIG_ENV, EXIT_NO_DATA_DIR, EXIT_OK
from csvwordfreq.logger import cli_logger as logging
from csvwordfreq.logger import setup_logging
from csvwordfreq.report import Reporter
from csvwordfreq.walker import DataDirError, walk


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog="csvwordfreq",
    description="Count word frequencies in one column of every CSV file in a directory.")
  parser.add_argument("--data-dir", help="directory holding the CSV files (default: data)")
  parser.add_argument("--column", type=int, help="zero-based index of the column to count (default: 12)")
  parser.add_argument("--delimiter", help="single field delimiter character (default: ',')")
  parser.add_argument("--top", dest="top_n", type=int, help="how many words the overall list shows (default: 10)")
  parser.add_argument("--quoted", action="store_true", default=None,
                      help="parse quoted fields with the csv module instead of a plain split")
  parser.add_argument("--config", help=f"JSON config file (default: ${CONFIG_ENV} if set)")
  parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)
  return parser


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
  parser = build_parser()
  opts = parser.parse_args(argv)

  try:
    config = load_config(opts.config, data_dir=opts.data_dir, column=opts.column,
                         delimiter=opts.delimiter, top_n=opts.top_n, quoted=opts.quoted,
                         log_level=opts.log_level)
  except ConfigError as e:
    parser.error(str(e))

  setup_logging(config.log_level)
  logging.debug(f"Running with {config}")

  reporter = Reporter(out, top_n=config.top_n)
  reporter.banner()
  reporter.system_info()

  try:
    stats = walk(config, reporter)
  except DataDirError as e:
    logging.error(f"Could not open directory: {e.path} ({e.cause.strerror})")
    logging.error(f"Please create a folder named '{e.path}' and add CSV files inside it.")
    return EXIT_NO_DATA_DIR

  reporter.finish(stats)
  return EXIT_OK


if __name__ == "__main__":
  raise SystemExit(main())
