import json
import logging
import pytest
from config.logging_config import JsonFormatter, setup_check_ata_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


def test_json_formatter_fields():
    record = logging.LogRecord("rpc.client", logging.WARNING, __file__, 1, "ошибка %s", ("x",), None)

    log_object = json.loads(JsonFormatter().format(record))

    assert log_object["level"] == "WARNING"
    assert log_object["message"] == "ошибка x"
    assert log_object["logger_name"] == "rpc.client"
    assert "exc_info" not in log_object


def test_setup_writes_json_file(tmp_path):
    log_path = setup_check_ata_logging(str(tmp_path / "logs"), level=logging.INFO)

    logging.getLogger("processing.account_inspector").info("проверено")
    logging.getLogger("processing.account_inspector").debug("скрыто")

    lines = (tmp_path / "logs" / "check_ata.log").read_text(encoding="utf-8").splitlines()
    assert log_path.endswith("check_ata.log")
    assert [json.loads(line)["message"] for line in lines] == ["проверено"]


def test_console_handler_goes_to_stderr(tmp_path, capsys):
    setup_check_ata_logging(str(tmp_path), level=logging.INFO, console_level=logging.WARNING)

    logging.getLogger("check_ata").info("только в файл")
    logging.getLogger("check_ata").warning("в консоль")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "в консоль" in captured.err
    assert "только в файл" not in captured.err
