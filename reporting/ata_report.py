# reporting/ata_report.py

import sys
from typing import List, Optional, TextIO

from processing.account_inspector import InspectionResult, InspectionStatus

HEADER = '🔍 Проверка Associated Token Accounts...'


def render_result(result: InspectionResult) -> List[str]:
    """Строки отчёта по одному адресу, без разделителя."""
    prefix = f"ATA {result.index}: {result.address}"
    if result.status is InspectionStatus.FOUND:
        record = result.record
        return [
            f"✅ {prefix}",
            f"   Mint: {record.mint}",
            f"   Balance: {record.amount}",
            f"   Owner: {record.owner}",
        ]
    if result.status is InspectionStatus.NOT_FOUND:
        return [f"❌ {prefix} - не найден"]
    return [f"⚠️ {prefix} - ошибка: {result.error}"]


class ConsoleReporter:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _print(self, line: str = "") -> None:
        # sys.stdout берём в момент печати, чтобы работал перехват вывода
        print(line, file=self.stream or sys.stdout, flush=True)

    def header(self) -> None:
        self._print(HEADER)

    def __call__(self, result: InspectionResult) -> None:
        for line in render_result(result):
            self._print(line)
        self._print()
