from typing import Final

DATA_DIR: Final[str] = "data"
# M1 is the 13th column, after 12 commas
TARGET_COLUMN: Final[int] = 12
DELIMITER: Final[str] = ","
TOP_N: Final[int] = 10
LOG_LEVEL: Final[str] = "INFO"

CONFIG_ENV: Final[str] = "WC_CONFIG"

EXIT_OK: Final[int] = 0
EXIT_NO_DATA_DIR: Final[int] = 1
