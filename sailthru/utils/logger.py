import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


class RequestLogger:
    """请求日志记录类，按天轮转写入 {log_dir}/{log_name}.log"""

    BACKUP_COUNT = 90

    def __init__(self, log_dir="logs", log_name="sailthru_requests", level=logging.INFO):
        """
        Args:
            log_dir: 日志目录
            log_name: 日志文件名前缀，同时作为 logger 名称
            level: 日志级别
        """
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        self.log_file = log_path / f"{log_name}.log"

        self.logger = logging.getLogger(log_name)
        self.logger.setLevel(level)

        # 避免重复添加handler
        if not any(isinstance(h, TimedRotatingFileHandler) for h in self.logger.handlers):
            formatter = logging.Formatter(
                '%(asctime)s|%(levelname)s|%(name)s|%(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            handler = TimedRotatingFileHandler(
                filename=self.log_file,
                when='midnight',
                interval=1,
                backupCount=self.BACKUP_COUNT,
                encoding='utf-8'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def get_logger(self) -> logging.Logger:
        return self.logger

    def close(self):
        for handler in list(self.logger.handlers):
            if isinstance(handler, TimedRotatingFileHandler):
                handler.close()
                self.logger.removeHandler(handler)
