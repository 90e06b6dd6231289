import logging
import os
import json
import sys

from config.config import LOG_DIR

LOG_FILE_NAME = 'check_ata.log'


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_object = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger_name": record.name,
        }
        if record.exc_info:
            log_object['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(log_object, ensure_ascii=False)


def setup_check_ata_logging(log_dir: str = LOG_DIR, level: int = logging.INFO, console_level: int = logging.WARNING) -> str:
    """
    Настраивает логирование для проверки ATA.

    stdout остаётся за отчётом, поэтому консольный handler пишет в stderr.
    Подробный лог в формате JSON уходит в файл <log_dir>/check_ata.log.
    Возвращает путь к файлу лога.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_FILE_NAME)

    file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(JsonFormatter())

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('[%(asctime)s] [%(levelname)s] %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, console_level))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # urllib3 на DEBUG слишком шумный
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return log_path
