import json
import yaml
import logging
from pydantic import ValidationError
from pathlib import Path
from typing import Any, Dict, Tuple
from viewrender.config import ApplicationConfig


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """Read YAML (by suffix) or JSON configuration file.

    :param path: file path
    :return: loaded mapping, empty for empty file
    """
    if isinstance(path, str):
        path = Path(path)
    with open(path, encoding="UTF-8") as file:
        if path.suffix in [".yaml", ".yml"]:
            loaded = yaml.safe_load(file)
        else:
            loaded = json.load(file)
    return loaded or {}


def load_config(file_name: str | Path) -> ApplicationConfig:
    try:
        return ApplicationConfig.model_validate(load_config_file(file_name))
    except ValidationError as error:
        raise ValueError("Error parsing configuration file") from error


def parse_param(value: str) -> Tuple[str, str]:
    """Split ``key=value`` command line template parameter.

    :param value: parameter string
    :return: key and value
    :raises ValueError: when there is no ``=`` or key is empty
    """
    key, separator, param = value.partition("=")
    if not separator or not key:
        raise ValueError(f"Expected key=value, got {value!r}")
    return key, param


class LogFormatter(logging.Formatter):
    _grey = "\x1b[38;21m"
    _green = "\x1b[32m"
    _yellow = "\u001b[33m"
    _red = "\x1b[31;21m"
    _bold_red = "\x1b[31;1m"
    _blue = "\u001b[34m"
    _white = "\u001b[37m"
    _reset = "\x1b[0m"
    _bold = "\u001b[1m"
    _prefix = _green + "%(asctime)s  " + _reset + _blue + "%(name)s " + _reset + _bold + "%(levelname)s " + _reset
    _message = "%(message)s"
    _formats = {
        logging.DEBUG: _prefix + _grey + _message + _reset,
        logging.INFO: _prefix + _white + _message + _reset,
        logging.WARNING: _prefix + _yellow + _message + _reset,
        logging.ERROR: _prefix + _red + _message + _reset,
        logging.CRITICAL: _prefix + _bold_red + _message + _reset,
    }

    def format(self, record):
        formatter = logging.Formatter(self._formats.get(record.levelno))
        return formatter.format(record)
