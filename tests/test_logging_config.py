import logging

import pytest

from movie_chat_api.app.core.config import Settings
from movie_chat_api.app.core.logging_config import HANDLER_NAME, setup_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    saved_uvicorn = {name: logging.getLogger(name).level for name in ("uvicorn", "uvicorn.access")}
    root.handlers = [h for h in root.handlers if h.get_name() != HANDLER_NAME]
    yield root
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_uvicorn.items():
        logging.getLogger(name).setLevel(level)


def test_setup_logging_writes_log_file(clean_root, tmp_path):
    log_file = tmp_path / "chat.log"
    setup_logging(Settings(log_level="debug", log_file=str(log_file)))

    assert clean_root.level == logging.DEBUG
    ours = [h for h in clean_root.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 2

    logging.getLogger("movie_chat_api.test").info("hello from the store")
    for handler in ours:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "movie-chat movie_chat_api.test: hello from the store" in text


def test_setup_logging_aligns_uvicorn_loggers(clean_root):
    setup_logging(Settings(log_level="WARNING", log_file=""))
    access = logging.getLogger("uvicorn.access")
    assert access.level == logging.WARNING
    assert access.propagate is True


def test_setup_logging_runs_once(clean_root):
    setup_logging(Settings(log_level="INFO", log_file=""))
    setup_logging(Settings(log_level="DEBUG", log_file=""))
    ours = [h for h in clean_root.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert clean_root.level == logging.INFO


def test_unknown_level_falls_back_to_info(clean_root):
    setup_logging(Settings(log_level="chatty", log_file=""))
    assert clean_root.level == logging.INFO
