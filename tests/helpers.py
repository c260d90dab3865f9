import os


def write_csv(directory: str, name: str, lines: list[str]) -> str:
  path = os.path.join(directory, name)
  with open(path, "w", encoding="utf-8") as f:
    f.write("\n".join(lines) + "\n")
  return path


def row(word: str, column: int = 12, width: int = 13) -> str:
  """A comma separated row with `word` at `column`, numbers elsewhere."""
  fields = [str(i) for i in range(width)]
  fields[column] = word
  return ",".join(fields)


HEADER = ",".join(f"col_{i}" for i in range(13))


def write_raw(directory: str, name: str, text: str) -> str:
  """Write `text` without any newline translation."""
  path = os.path.join(directory, name)
  with open(path, "w", encoding="utf-8", newline="") as f:
    f.write(text)
  return path


# an unterminated quote swallows the rest of the file into one csv field,
# well past the csv module's default field size limit
UNTERMINATED = "id,word\n1,cat\n2,\"unterminated\n" + "3,x\n" * 40000
