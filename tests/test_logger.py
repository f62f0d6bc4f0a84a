# -*- coding: utf-8 -*-
# tests/test_logger.py

from logging.handlers import TimedRotatingFileHandler

from sailthru.utils import RequestLogger


def test_request_logger_writes_file(tmp_path):
    request_logger = RequestLogger(log_dir=str(tmp_path / 'logs'), log_name='sailthru_logger_test')
    try:
        request_logger.get_logger().info("GET https://api.sailthru.com/email")
        for handler in request_logger.get_logger().handlers:
            handler.flush()
        content = request_logger.log_file.read_text(encoding='utf-8')
        assert 'GET https://api.sailthru.com/email' in content
        assert '|INFO|sailthru_logger_test|' in content
    finally:
        request_logger.close()


def test_request_logger_does_not_duplicate_handlers(tmp_path):
    first = RequestLogger(log_dir=str(tmp_path), log_name='sailthru_logger_dup')
    second = RequestLogger(log_dir=str(tmp_path), log_name='sailthru_logger_dup')
    try:
        handlers = [h for h in second.get_logger().handlers if isinstance(h, TimedRotatingFileHandler)]
        assert len(handlers) == 1
    finally:
        first.close()
