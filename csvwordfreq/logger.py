import sys
from typing import Any, Callable, Union

from loguru import logger

from csvwordfreq.constants import LOG_LEVEL

logger.remove()

_fmt = "<green>{time:HH:mm:ss}</green> <level>{level}</level> <cyan>{extra[component]}</cyan> {message}"
_file_fmt = "{time} {level} {extra[component]} {message}"

_stderr_sink_id = logger.add(sys.stderr, format=_fmt, level=LOG_LEVEL)

walker_logger = logger.bind(component="walker")
counter_logger = logger.bind(component="counter")
cli_logger = logger.bind(component="cli")
generator_logger = logger.bind(component="generator")


def setup_logging(level: str = LOG_LEVEL) -> None:
  """Reinstall the stderr sink at the given level."""
  global _stderr_sink_id
  logger.remove(_stderr_sink_id)
  # look sys.stderr up again, it may have been swapped since import
  _stderr_sink_id = logger.add(sys.stderr, format=_fmt, level=level)


def add_sink(sink: Union[str, Callable[[Any], None]], level: str = "DEBUG") -> int:
  fmt = _file_fmt if isinstance(sink, str) else "{level} {extra[component]} {message}"
  return logger.add(sink, format=fmt, level=level)


def remove_sink(sink_id: int) -> None:
  logger.remove(sink_id)
