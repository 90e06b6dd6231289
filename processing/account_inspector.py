# Файл: processing/account_inspector.py
import logging
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional

from pydantic import BaseModel

from config.config import TOKEN_PROGRAM_ID
from decoder.token_account import TokenAccountRecord, get_account

logger = logging.getLogger("processing.account_inspector")


class InspectionStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class InspectionResult(BaseModel):
    index: int  # позиция в списке, с 1
    address: str
    status: InspectionStatus
    record: Optional[TokenAccountRecord] = None
    error: Optional[str] = None


def _error_message(error: Exception) -> str:
    # У некоторых исключений пустой str(), тогда хотя бы имя класса
    return str(error) or error.__class__.__name__


class AccountInspector:
    """
    Последовательная проверка token account'ов.

    Для каждого адреса: getAccountInfo -> если аккаунт есть, второй запрос
    с разбором как SPL token account. Любая ошибка по адресу превращается
    в результат ERROR и не прерывает цикл.
    """

    def __init__(self, rpc_client, program_id: str = TOKEN_PROGRAM_ID, commitment: Optional[str] = None):
        self.rpc_client = rpc_client
        self.program_id = program_id
        self.commitment = commitment

    def inspect(self, index: int, address: str) -> InspectionResult:
        try:
            account_info = self.rpc_client.get_account_info(address, commitment=self.commitment)
            if account_info is None:
                logger.info(f"[{index}] {address}: аккаунт не найден")
                return InspectionResult(index=index, address=address, status=InspectionStatus.NOT_FOUND)

            record = get_account(self.rpc_client, address, commitment=self.commitment, program_id=self.program_id)
        except Exception as e:
            # Сетевые ошибки и ошибки формата намеренно не различаются
            logger.warning(f"[{index}] {address}: ошибка проверки: {e!r}", exc_info=logger.isEnabledFor(logging.DEBUG))
            return InspectionResult(index=index, address=address, status=InspectionStatus.ERROR, error=_error_message(e))

        logger.info(f"[{index}] {address}: mint={record.mint} amount={record.amount} owner={record.owner}")
        return InspectionResult(index=index, address=address, status=InspectionStatus.FOUND, record=record)

    def inspect_all(self, addresses: Iterable[str]) -> Iterator[InspectionResult]:
        """Лениво отдаёт результаты строго в порядке входного списка."""
        for index, address in enumerate(addresses, start=1):
            yield self.inspect(index, address)

    def run(self, addresses: Iterable[str], render: Callable[[InspectionResult], None]) -> List[InspectionResult]:
        """Проверяет адреса и отрисовывает каждый результат до перехода к следующему адресу."""
        results = []
        for result in self.inspect_all(addresses):
            render(result)
            results.append(result)
        found = sum(1 for r in results if r.status is InspectionStatus.FOUND)
        logger.info(f"Проверено адресов: {len(results)}, найдено token account'ов: {found}")
        return results
