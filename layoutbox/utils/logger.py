# -*- coding: utf-8 -*-
# File: logger.py

# Copyright (c) Tensorpack Contributors
# Licensed under the Apache License, Version 2.0 (the "License")

"""
Package logger. Based on the tensorpack logger
<https://github.com/tensorpack/tensorpack/blob/master/tensorpack/utils/logger.py>

Records issued by this package carry a `LoggingRecord` as message. Besides the text, a `LoggingRecord` can hold a
dict with structured information, e.g. the number of boxes before and after an operation. The terminal only shows
the text, the optional log file receives the dict as well.

Example:
    ```python
    from layoutbox.utils.logger import LoggingRecord, logger, set_logger_dir

    set_logger_dir("path/to/dir")
    logger.info(LoggingRecord("combine_overlaps finished", {"num_boxes_out": 12}))
    ```

Environment variables:

- `LOG_LEVEL`: Level of the package logger (default: `INFO`)
- `LOG_PROPAGATE`: Pass records on to the root logger (default: `False`)
- `STD_OUT_VERBOSE`: Also print the dict of a `LoggingRecord` to the terminal (default: `False`)
- `FILTER_THIRD_PARTY_LIB`: Drop all records that do not carry a `LoggingRecord` (default: `False`)
"""

import functools
import json
import logging
import logging.config
import os
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union, no_type_check

from termcolor import colored

from .types import PathLikeOrStr

__all__ = ["logger", "LoggingRecord", "set_logger_dir", "get_logger_dir", "log_once"]

ENV_VARS_TRUE: set[str] = {"1", "True", "TRUE", "true", "yes"}

_LOGGER_NAME = "layoutbox"
_LOG_FILE_NAME = "log.jsonl"

# level number -> (tag, color, attributes)
_LEVEL_TAGS: dict[int, tuple[str, str, list[str]]] = {
    logging.DEBUG: ("DBG", "green", ["blink"]),
    logging.INFO: ("INF", "green", []),
    logging.WARNING: ("WRN", "magenta", ["blink"]),
    logging.ERROR: ("ERR", "red", ["blink", "underline"]),
    logging.CRITICAL: ("ERR", "red", ["blink", "underline"]),
}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "False") in ENV_VARS_TRUE


@dataclass
class LoggingRecord:
    """
    Message of a record issued by this package.

    Args:
        msg: Text of the record
        log_dict: Optional structured information. The text is added under the key `msg`.
    """

    msg: str
    log_dict: Optional[dict[Union[int, str], Any]] = field(default=None)

    def __post_init__(self) -> None:
        if self.log_dict is not None:
            self.log_dict["msg"] = self.msg

    def __str__(self) -> str:
        return self.msg


class CustomFilter(logging.Filter):
    """Lets only records with a `LoggingRecord` message pass, if `FILTER_THIRD_PARTY_LIB` is set"""

    filter_third_party_lib = _env_flag("FILTER_THIRD_PARTY_LIB")

    def filter(self, record: logging.LogRecord) -> bool:
        return not self.filter_third_party_lib or isinstance(record.msg, LoggingRecord)


class StreamFormatter(logging.Formatter):
    """Colored one line terminal output with a level tag"""

    std_out_verbose = _env_flag("STD_OUT_VERBOSE")

    @no_type_check
    def format(self, record: logging.LogRecord) -> str:
        location = colored("[%(asctime)s @%(filename)s:%(lineno)d]", "green")
        msg = colored("%(message)s", "white")
        if self.std_out_verbose and isinstance(record.msg, LoggingRecord):
            msg += f" Additional verbose infos: {repr(record.msg.log_dict)}"

        tag = _LEVEL_TAGS.get(record.levelno)
        if tag is None:
            fmt = f"{location} {msg}"
        else:
            text, color, attrs = tag
            fmt = f"{location}  {colored(text, color, attrs=attrs)}  {msg}"
        self._style._fmt = fmt  # pylint: disable=W0212
        self._fmt = fmt
        return super().format(record)


class FileFormatter(logging.Formatter):
    """One json object per record. The dict of a `LoggingRecord` is merged into the object."""

    @no_type_check
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": _get_time_str(),
            "level_name": record.levelname,
            "level_no": record.levelno,
            "module_name": record.filename,
            "line_number": record.lineno,
            "message": super().format(record),
        }
        if isinstance(record.msg, LoggingRecord) and record.msg.log_dict:
            entry.update({key: value for key, value in record.msg.log_dict.items() if key != "msg"})
        return json.dumps(entry, default=str)


def _get_time_str() -> str:
    return datetime.now().strftime("%m%d-%H%M%S")


def _get_logger() -> logging.Logger:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {"customfilter": {"()": CustomFilter}},
            "formatters": {"streamformatter": {"()": lambda: StreamFormatter(datefmt="%m%d %H:%M.%S")}},
            "handlers": {
                "streamhandler": {
                    "class": "logging.StreamHandler",
                    "filters": ["customfilter"],
                    "formatter": "streamformatter",
                }
            },
            "loggers": {
                _LOGGER_NAME: {
                    "handlers": ["streamhandler"],
                    "level": os.environ.get("LOG_LEVEL", "INFO"),
                    "propagate": _env_flag("LOG_PROPAGATE"),
                }
            },
        }
    )
    return logging.getLogger(_LOGGER_NAME)


logger = _get_logger()

_LOG_DIR: Optional[str] = None
_FILE_HANDLER: Optional[logging.FileHandler] = None


def _replace_file_handler(path: str) -> None:
    global _FILE_HANDLER  # pylint: disable=W0603
    if _FILE_HANDLER is not None:
        logger.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
        _FILE_HANDLER = None
    if os.path.isfile(path):
        backup_path = f"{path}.{_get_time_str()}"
        shutil.move(path, backup_path)
        logger.info(LoggingRecord(f"Existing log file {path} moved to {backup_path}"))
    handler = logging.FileHandler(filename=path, encoding="utf-8", mode="w")
    handler.setFormatter(FileFormatter(datefmt="%m%d %H:%M:%S"))
    handler.addFilter(CustomFilter())
    logger.addHandler(handler)
    _FILE_HANDLER = handler


def set_logger_dir(dir_name: PathLikeOrStr) -> None:
    """
    Write all records additionally as json lines into `dir_name/log.jsonl`. A log file from an earlier run is moved
    to a backup file with a time suffix. Calling the function again switches to the new directory.

    Args:
        dir_name: Log directory. Will be created if it does not exist.
    """
    global _LOG_DIR  # pylint: disable=W0603
    if isinstance(dir_name, Path):
        dir_name = dir_name.as_posix()
    log_dir = os.path.normpath(os.fspath(dir_name))
    os.makedirs(log_dir, exist_ok=True)
    _replace_file_handler(os.path.join(log_dir, _LOG_FILE_NAME))
    _LOG_DIR = log_dir


def get_logger_dir() -> Optional[str]:
    """
    The directory set with `set_logger_dir`, or `None`
    """
    return _LOG_DIR


@functools.lru_cache(maxsize=None)
def log_once(message: str, function: str = "info") -> None:
    """
    Log a message only on the first call. Further calls with the same arguments do nothing.

    Args:
        message: Text to log
        function: Name of the logger method, e.g. `warning`
    """
    getattr(logger, function)(LoggingRecord(message))
