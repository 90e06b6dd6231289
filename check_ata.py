"""
Проверка Associated Token Accounts через Solana JSON-RPC.

Usage:
    python check_ata.py
    python check_ata.py <ADDRESS> [<ADDRESS> ...] --rpc-url https://api.devnet.solana.com
    python check_ata.py --owner <WALLET> --mint <MINT> --program token-2022
"""
import argparse
import logging
import sys
from typing import List, Optional

import config.config as app_config
from config.logging_config import setup_check_ata_logging
from processing.account_inspector import AccountInspector
from processing.errors import ConfigurationError, FatalStartupError, ServiceUnavailableError
from reporting.ata_report import ConsoleReporter
from rpc.client import RPCClient, RPCError
from utils.associated_token import get_associated_token_address, is_valid_address

logger = logging.getLogger("check_ata")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Проверка существования и баланса token account'ов.")
    parser.add_argument("addresses", nargs="*", help="Адреса token account'ов (по умолчанию ATA_ADDRESSES из конфига).")
    parser.add_argument("--rpc-url", default=app_config.SOLANA_RPC_URL, help="RPC endpoint.")
    parser.add_argument("--commitment", default=app_config.SOLANA_COMMITMENT, help="processed | confirmed | finalized.")
    parser.add_argument("--program", choices=sorted(app_config.TOKEN_PROGRAMS), default="spl-token", help="Программа токенов.")
    parser.add_argument("--owner", action="append", default=[], help="Владелец для вычисления ATA (в паре с --mint).")
    parser.add_argument("--mint", action="append", default=[], help="Mint для вычисления ATA (в паре с --owner).")
    parser.add_argument("--timeout", type=float, default=app_config.RPC_TIMEOUT, help="Таймаут HTTP-запроса, секунд.")
    parser.add_argument("--skip-health-check", action="store_true", help="Не проверять доступность RPC перед стартом.")
    parser.add_argument("--log-dir", default=app_config.LOG_DIR, help="Каталог для check_ata.log.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Уровень файлового лога.")
    args = parser.parse_args(argv)
    if len(args.owner) != len(args.mint):
        parser.error("--owner и --mint должны передаваться парами")
    return args


def resolve_addresses(args: argparse.Namespace) -> List[str]:
    """Собирает итоговый список адресов и проверяет его до начала запросов."""
    program_id = app_config.TOKEN_PROGRAMS[args.program]
    addresses = list(args.addresses)
    for owner, mint in zip(args.owner, args.mint):
        try:
            ata = get_associated_token_address(owner, mint, program_id)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        logger.info(f"ATA для owner={owner} mint={mint}: {ata}")
        addresses.append(ata)

    if not addresses:
        addresses = list(app_config.ATA_ADDRESSES)
    if not addresses:
        raise ConfigurationError("Список адресов для проверки пуст")

    invalid = [a for a in addresses if not is_valid_address(a)]
    if invalid:
        raise ConfigurationError(f"Некорректные адреса: {', '.join(invalid)}")
    return addresses


def check_service(client: RPCClient) -> None:
    try:
        version = client.get_version()
    except RPCError as e:
        raise ServiceUnavailableError(f"RPC {client.rpc_url} недоступен: {e}") from e
    logger.info(f"RPC {client.rpc_url} отвечает, версия: {(version or {}).get('solana-core', 'unknown')}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    log_path = setup_check_ata_logging(args.log_dir, level=getattr(logging, args.log_level))
    logger.info(f"Лог пишется в {log_path}")

    try:
        commitment = args.commitment.strip().lower()
        if commitment not in app_config.VALID_COMMITMENTS:
            raise ConfigurationError(f"Неизвестный commitment: {args.commitment}")
        addresses = resolve_addresses(args)
        client = RPCClient(rpc_url=args.rpc_url, commitment=commitment, timeout=args.timeout)
        if not args.skip_health_check:
            check_service(client)
    except FatalStartupError as e:
        logger.critical(f"Проверка не запущена: {e}")
        return 1

    reporter = ConsoleReporter()
    reporter.header()
    inspector = AccountInspector(client, program_id=app_config.TOKEN_PROGRAMS[args.program], commitment=commitment)
    inspector.run(addresses, reporter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
