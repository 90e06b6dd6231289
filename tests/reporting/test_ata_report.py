import io
from decoder.token_account import TokenAccountRecord
from processing.account_inspector import InspectionResult, InspectionStatus
from reporting.ata_report import ConsoleReporter, HEADER, render_result

ATA = "ASkpsRKwGKbUmmMrdknqnHVrmxsU8Ws6qeX5iE6AUERK"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WALLET = "HkuaPeSMog2jbGMYm7vjPFSaheM69PS1VXoioTp25sxS"


def _found(amount=1000000):
    record = TokenAccountRecord(
        address=ATA, mint=USDC_MINT, owner=WALLET, amount=amount,
        is_initialized=True, is_frozen=False, is_native=False,
    )
    return InspectionResult(index=1, address=ATA, status=InspectionStatus.FOUND, record=record)


def test_render_found():
    assert render_result(_found()) == [
        f"✅ ATA 1: {ATA}",
        f"   Mint: {USDC_MINT}",
        "   Balance: 1000000",
        f"   Owner: {WALLET}",
    ]


def test_render_balance_is_not_rounded():
    lines = render_result(_found(amount=2 ** 64 - 1))

    assert "   Balance: 18446744073709551615" in lines


def test_render_not_found():
    result = InspectionResult(index=2, address=ATA, status=InspectionStatus.NOT_FOUND)

    assert render_result(result) == [f"❌ ATA 2: {ATA} - не найден"]


def test_render_error():
    result = InspectionResult(index=3, address=ATA, status=InspectionStatus.ERROR, error="Invalid param: WrongSize")

    lines = render_result(result)

    assert lines == [f"⚠️ ATA 3: {ATA} - ошибка: Invalid param: WrongSize"]
    assert not any("Mint:" in line or "Balance:" in line or "Owner:" in line for line in lines)


def test_console_reporter_adds_blank_separator():
    stream = io.StringIO()
    reporter = ConsoleReporter(stream)

    reporter.header()
    reporter(InspectionResult(index=1, address=ATA, status=InspectionStatus.NOT_FOUND))

    assert stream.getvalue() == f"{HEADER}\n❌ ATA 1: {ATA} - не найден\n\n"


def test_console_reporter_writes_to_stdout_by_default(capsys):
    ConsoleReporter()(_found())

    out = capsys.readouterr().out
    assert out.endswith("\n\n")
    assert out.count("Mint:") == 1


def test_console_reporter_explicit_none_stream_falls_back_to_stdout(capsys):
    ConsoleReporter(stream=None).header()

    assert capsys.readouterr().out == f"{HEADER}\n"
