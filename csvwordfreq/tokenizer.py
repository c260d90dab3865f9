from __future__ import annotations

from csvwordfreq.constants import DELIMITER


def clean_token(field: str) -> str:
  """Drop everything but letters and lowercase the rest. May return ""."""
  return "".join(ch.lower() for ch in field if ch.isascii() and ch.isalpha())


def split_row(line: str, delimiter: str = DELIMITER) -> list[str]:
  """
  Cut `line` at every `delimiter`; the text after the last one is the final
  field. There is no quoting or escaping, so a delimiter inside a quoted
  value still splits it.
  """
  fields = []
  start = 0
  while True:
    pos = line.find(delimiter, start)
    if pos == -1:
      break
    fields.append(line[start:pos])
    start = pos + len(delimiter)
  fields.append(line[start:])
  return fields
