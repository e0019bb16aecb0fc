import logging
from logging.handlers import RotatingFileHandler

import pytest

from core.logger import setup_logger


@pytest.fixture
def fresh_logger_name(request):
    name = f"lead_forms_test.{request.node.name}"
    yield name
    test_logger = logging.getLogger(name)
    for handler in list(test_logger.handlers):
        handler.close()
        test_logger.removeHandler(handler)


def test_file_handler_written_to_log_dir(tmp_path, fresh_logger_name):
    test_logger = setup_logger(fresh_logger_name, log_dir=tmp_path / "logs")

    file_handlers = [h for h in test_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert (tmp_path / "logs" / "app.log").exists()


def test_unwritable_log_dir_falls_back_to_console(tmp_path, fresh_logger_name):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("occupied")

    test_logger = setup_logger(fresh_logger_name, log_dir=blocker / "logs")

    assert len(test_logger.handlers) == 1
    assert not isinstance(test_logger.handlers[0], RotatingFileHandler)
    assert isinstance(test_logger.handlers[0], logging.StreamHandler)


def test_setup_is_idempotent(tmp_path, fresh_logger_name):
    first = setup_logger(fresh_logger_name, log_dir=tmp_path)
    handler_count = len(first.handlers)

    second = setup_logger(fresh_logger_name, log_dir=tmp_path)

    assert second is first
    assert len(second.handlers) == handler_count


def test_log_level_from_argument(tmp_path, fresh_logger_name):
    test_logger = setup_logger(fresh_logger_name, log_level="debug", log_dir=tmp_path)
    assert test_logger.level == logging.DEBUG
