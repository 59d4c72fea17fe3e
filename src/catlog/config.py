from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class DispatcherConfig:
    # Appended to in the current working directory; never rotated
    log_file: str = "log.txt"
    # strftime pattern for the file-sink prefix (always UTC)
    timestamp_format: str = "[%Y-%m-%d %H:%M:%S]"
    # Item separator and record terminator
    separator: str = " "
    terminator: str = "\n"
    # Field separator placed between call-site fields
    field_separator: str = ":"
    encoding: str = "utf-8"


# Plain tag text per category name; INFO carries no tag
TAGS: Dict[str, str] = {
    "DEBUG": "[DEBUG]:",
    "ERROR": "[ERROR]:",
    "SUCCESS": "[SUCCESS]:",
}

# rich color names for console tags (standard 8-color palette)
TAG_COLORS: Dict[str, str] = {
    "DEBUG": "yellow",
    "ERROR": "red",
    "SUCCESS": "green",
}
