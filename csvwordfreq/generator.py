from __future__ import annotations

import argparse
import csv
import os
import random
from typing import Optional, Sequence

import pandas as pd

from csvwordfreq.constants import TARGET_COLUMN
from csvwordfreq.logger import generator_logger as logging

WORD_LIST = [
  'the', 'quick', 'brown', 'fox', 'jumps', 'over', 'lazy', 'dog',
  'hello', 'world', 'python', 'code', 'generate', 'csv', 'file',
  'random', 'sentence', 'data', 'test', 'example', 'text', 'string',
  'physics', 'machine', 'working', 'cloud', 'system', 'logic',
  'master', 'architect', 'destination', 'song'
]

# noise the tokenizer is expected to strip again
DECORATIONS = ['', '', '', '!', '.', '?', ';', '1', '42']


def generate_word(rng: random.Random, word_list: Sequence[str]) -> str:
  word = rng.choice(word_list)
  if rng.random() < 0.3:
    word = word.upper()
  elif rng.random() < 0.3:
    word = word.capitalize()
  return word + rng.choice(DECORATIONS)


def generate_csv_files(folder_path: str, n: int, rows_per_file: int,
                       num_columns: int = TARGET_COLUMN + 1, column: int = TARGET_COLUMN,
                       seed: Optional[int] = None,
                       word_list: Sequence[str] = WORD_LIST) -> list[str]:
  """
  Write `n` CSV files with a header and `rows_per_file` rows each. Column
  `column` holds a word, every other column a number. Returns the paths.
  """
  if n < 0 or rows_per_file < 0:
    raise ValueError("number of files and rows must not be negative")
  if not 0 <= column < num_columns:
    raise ValueError(f"column {column} is outside of {num_columns} columns")
  if not word_list:
    raise ValueError("word list is empty")

  rng = random.Random(seed)
  os.makedirs(folder_path, exist_ok=True)

  paths = []
  for i in range(n):
    data = {}
    for c in range(num_columns):
      if c == column:
        data[f'col_{c}'] = [generate_word(rng, word_list) for _ in range(rows_per_file)]
      else:
        data[f'col_{c}'] = [rng.randint(0, 9999) for _ in range(rows_per_file)]
    df = pd.DataFrame(data)
    filename = os.path.join(folder_path, f'file_{i + 1}.csv')
    # no quoting, the default splitter does not understand it
    df.to_csv(filename, index=False, quoting=csv.QUOTE_NONE)
    logging.info(f'Generated {filename} with {rows_per_file} rows')
    paths.append(filename)
  return paths


def main(argv: Optional[Sequence[str]] = None) -> int:
  parser = argparse.ArgumentParser(prog="csvwordfreq-generate",
                                   description="Generate a synthetic CSV dataset.")
  parser.add_argument("output_dir")
  parser.add_argument("num_files", type=int)
  parser.add_argument("--rows", type=int, default=1000, help="rows per file (default: 1000)")
  parser.add_argument("--columns", type=int, default=TARGET_COLUMN + 1)
  parser.add_argument("--column", type=int, default=TARGET_COLUMN, help="column holding the words")
  parser.add_argument("--seed", type=int)
  opts = parser.parse_args(argv)

  try:
    generate_csv_files(opts.output_dir, opts.num_files, opts.rows,
                       num_columns=opts.columns, column=opts.column, seed=opts.seed)
  except ValueError as e:
    parser.error(str(e))
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
