# -*- coding: utf-8 -*-
# File: test_logger.py

# Copyright 2024 Dr. Janis Meyer. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Testing the module utils.logger
"""

import json
import logging
from pathlib import Path

from pytest import LogCaptureFixture

from layoutbox.utils.logger import LoggingRecord, get_logger_dir, log_once, logger, set_logger_dir


def test_logging_record() -> None:
    """
    The message is added to the log dict
    """

    # Act
    record = LoggingRecord("resolved overlaps", {"num_boxes": 3})

    # Assert
    assert str(record) == "resolved overlaps"
    assert record.log_dict == {"num_boxes": 3, "msg": "resolved overlaps"}
    assert LoggingRecord("no dict").log_dict is None


def test_set_logger_dir_writes_json_lines(tmp_path: Path) -> None:
    """
    Records are written as json lines into log.jsonl
    """

    # Arrange
    log_dir = tmp_path / "logs"

    # Act
    set_logger_dir(log_dir)
    logger.info(LoggingRecord("handle_overlaps", {"num_boxes_in": 5}))
    for handler in logger.handlers:
        handler.flush()

    # Assert
    assert get_logger_dir() == str(log_dir)
    lines = (log_dir / "log.jsonl").read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "handle_overlaps"
    assert record["num_boxes_in"] == 5
    assert record["level_name"] == "INFO"


def test_set_logger_dir_backs_up_existing_file(tmp_path: Path) -> None:
    """
    An existing log file is moved to a backup
    """

    # Arrange
    (tmp_path / "log.jsonl").write_text("old\n", encoding="utf-8")

    # Act
    set_logger_dir(tmp_path)

    # Assert
    backups = [path for path in tmp_path.iterdir() if path.name.startswith("log.jsonl.")]
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "old\n"


def test_log_once(package_caplog: LogCaptureFixture) -> None:
    """
    The same message is only logged once
    """

    # Act
    with package_caplog.at_level(logging.WARNING, logger="layoutbox"):
        log_once("search range is small", "warning")
        log_once("search range is small", "warning")

    # Assert
    records = [record for record in package_caplog.records if record.getMessage() == "search range is small"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
