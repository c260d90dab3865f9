import json
import os
import tempfile
from unittest import TestCase, mock

from csvwordfreq.config import Config, ConfigError, load_config, read_config
from csvwordfreq.constants import CONFIG_ENV


class ConfigTest(TestCase):
  def test_defaults(self) -> None:
    config = Config()
    self.assertEqual(config.data_dir, "data")
    self.assertEqual(config.column, 12)
    self.assertEqual(config.delimiter, ",")
    self.assertEqual(config.top_n, 10)
    self.assertFalse(config.quoted)

  def test_invalid_values(self) -> None:
    for bad in [{"delimiter": ""}, {"delimiter": ";;"}, {"column": -1}, {"column": "3"},
                {"column": True}, {"top_n": -5}, {"data_dir": ""}, {"quoted": "yes"},
                {"log_level": "LOUD"}]:
      with self.subTest(bad=bad), self.assertRaises(ConfigError):
        Config(**bad)

  def test_log_level_is_normalized(self) -> None:
    self.assertEqual(Config(log_level="debug").log_level, "DEBUG")

  def test_unknown_keys(self) -> None:
    with self.assertRaises(ConfigError):
      Config.from_dict({"colum": 3})

  def test_overrides_skip_none(self) -> None:
    config = Config(column=3).with_overrides(column=None, delimiter=";")
    self.assertEqual(config.column, 3)
    self.assertEqual(config.delimiter, ";")


class LoadConfigTest(TestCase):
  def setUp(self) -> None:
    self.tmp = tempfile.TemporaryDirectory()
    self.addCleanup(self.tmp.cleanup)
    self.path = os.path.join(self.tmp.name, "config.json")
    env = mock.patch.dict(os.environ)
    env.start()
    os.environ.pop(CONFIG_ENV, None)
    self.addCleanup(env.stop)

  def write(self, content: str) -> None:
    with open(self.path, "w") as f:
      f.write(content)

  def test_no_file(self) -> None:
    self.assertEqual(load_config(), Config())

  def test_file_and_overrides(self) -> None:
    self.write(json.dumps({"column": 2, "top_n": 3}))
    config = load_config(self.path, top_n=5)
    self.assertEqual(config.column, 2)
    self.assertEqual(config.top_n, 5)

  def test_env_variable(self) -> None:
    self.write(json.dumps({"data_dir": "csv_files"}))
    os.environ[CONFIG_ENV] = self.path
    self.assertEqual(load_config().data_dir, "csv_files")

  def test_bad_json(self) -> None:
    self.write("{not json")
    with self.assertRaises(ConfigError):
      read_config(self.path)

  def test_not_an_object(self) -> None:
    self.write("[1, 2]")
    with self.assertRaises(ConfigError):
      read_config(self.path)

  def test_missing_file(self) -> None:
    with self.assertRaises(ConfigError):
      load_config(os.path.join(self.tmp.name, "missing.json"))
