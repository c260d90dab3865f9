import os
import tempfile
from unittest import TestCase

import pandas as pd

from csvwordfreq.config import Config
from csvwordfreq.counter import count_file
from csvwordfreq.generator import WORD_LIST, generate_csv_files, main
from csvwordfreq.walker import walk


class GeneratorTest(TestCase):
  def setUp(self) -> None:
    self.tmp = tempfile.TemporaryDirectory()
    self.addCleanup(self.tmp.cleanup)
    self.dir = os.path.join(self.tmp.name, "csv_files")

  def test_files_are_countable(self) -> None:
    paths = generate_csv_files(self.dir, 3, 20, seed=7)
    self.assertEqual(len(paths), 3)

    df = pd.read_csv(paths[0])
    self.assertEqual(len(df), 20)
    self.assertEqual(len(df.columns), 13)

    result = count_file(paths[0])
    self.assertEqual(sum(result.counts.values()), 20)
    self.assertTrue(set(result.counts) <= set(WORD_LIST))

    stats = walk(Config(data_dir=self.dir))
    self.assertEqual(stats.file_count, 3)
    self.assertEqual(sum(stats.total.values()), 60)

  def test_seed_is_reproducible(self) -> None:
    first = generate_csv_files(os.path.join(self.dir, "1"), 1, 10, seed=3)
    second = generate_csv_files(os.path.join(self.dir, "2"), 1, 10, seed=3)
    with open(first[0]) as a, open(second[0]) as b:
      self.assertEqual(a.read(), b.read())

  def test_other_column(self) -> None:
    paths = generate_csv_files(self.dir, 1, 5, num_columns=3, column=1, seed=1)
    self.assertEqual(sum(count_file(paths[0], column=1).counts.values()), 5)

  def test_bad_arguments(self) -> None:
    with self.assertRaises(ValueError):
      generate_csv_files(self.dir, 1, 5, num_columns=3, column=3)
    with self.assertRaises(ValueError):
      generate_csv_files(self.dir, -1, 5)

  def test_main(self) -> None:
    self.assertEqual(main([self.dir, "2", "--rows", "4", "--seed", "1"]), 0)
    self.assertEqual(sorted(os.listdir(self.dir)), ["file_1.csv", "file_2.csv"])
