class FatalStartupError(Exception):
    """Базовое исключение для ошибок до начала проверки адресов. Завершает процесс."""
    pass

class ConfigurationError(FatalStartupError):
    """Некорректная конфигурация: пустой или битый список адресов, неизвестный commitment и т.п."""
    pass

class ServiceUnavailableError(FatalStartupError):
    """RPC-узел не ответил на стартовую проверку."""
    pass
