"""
Декодирование SPL token account (Token Program и Token-2022).

Базовый layout аккаунта: 165 байт, little-endian. У Token-2022 после
базовой части может идти байт типа аккаунта и TLV-расширения.
"""
import logging
from typing import Optional

import base58
from borsh_construct import CStruct, U8, U32, U64
from construct import Bytes
from pydantic import BaseModel

from config.config import TOKEN_PROGRAM_ID

logger = logging.getLogger("decoder.token_account")

ACCOUNT_SIZE = 165
MULTISIG_SIZE = 355
ACCOUNT_TYPE_SIZE = 1

# AccountState
STATE_UNINITIALIZED = 0
STATE_INITIALIZED = 1
STATE_FROZEN = 2

# AccountType из Token-2022
ACCOUNT_TYPE_ACCOUNT = 2

PublicKeyBytes = Bytes(32)

TokenAccountLayout = CStruct(
    "mint" / PublicKeyBytes,
    "owner" / PublicKeyBytes,
    "amount" / U64,
    "delegate_option" / U32,
    "delegate" / PublicKeyBytes,
    "state" / U8,
    "is_native_option" / U32,
    "is_native" / U64,
    "delegated_amount" / U64,
    "close_authority_option" / U32,
    "close_authority" / PublicKeyBytes,
)


class TokenError(Exception):
    """Базовая ошибка разбора token account."""
    pass


class TokenAccountNotFoundError(TokenError):
    pass


class TokenInvalidAccountOwnerError(TokenError):
    pass


class TokenInvalidAccountSizeError(TokenError):
    pass


class TokenInvalidAccountError(TokenError):
    pass


class TokenAccountRecord(BaseModel):
    address: str
    mint: str
    owner: str
    amount: int
    delegate: Optional[str] = None
    delegated_amount: int = 0
    is_initialized: bool
    is_frozen: bool
    is_native: bool
    rent_exempt_reserve: Optional[int] = None
    close_authority: Optional[str] = None
    tlv_data: bytes = b""


def _to_base58(b: bytes) -> str:
    return base58.b58encode(b).decode()


def unpack_account(address: str, info, program_id: str = TOKEN_PROGRAM_ID) -> TokenAccountRecord:
    """
    Разбирает AccountInfo как token account программы program_id.

    Проверки повторяют getAccount из @solana/spl-token: владелец аккаунта,
    размер данных, multisig-размер и байт типа аккаунта для расширений.
    """
    if info is None:
        raise TokenAccountNotFoundError(f"Token account {address} not found")
    if info.owner != program_id:
        raise TokenInvalidAccountOwnerError(
            f"Account {address} is owned by {info.owner}, expected token program {program_id}"
        )

    data = info.data
    if len(data) < ACCOUNT_SIZE:
        raise TokenInvalidAccountSizeError(
            f"Account {address} data size {len(data)} is smaller than {ACCOUNT_SIZE}"
        )

    tlv_data = b""
    if len(data) > ACCOUNT_SIZE:
        if len(data) == MULTISIG_SIZE:
            raise TokenInvalidAccountSizeError(f"Account {address} has multisig size {MULTISIG_SIZE}")
        if data[ACCOUNT_SIZE] != ACCOUNT_TYPE_ACCOUNT:
            raise TokenInvalidAccountError(
                f"Account {address} has account type {data[ACCOUNT_SIZE]}, expected {ACCOUNT_TYPE_ACCOUNT}"
            )
        tlv_data = bytes(data[ACCOUNT_SIZE + ACCOUNT_TYPE_SIZE:])

    raw = TokenAccountLayout.parse(bytes(data[:ACCOUNT_SIZE]))

    return TokenAccountRecord(
        address=address,
        mint=_to_base58(raw.mint),
        owner=_to_base58(raw.owner),
        amount=raw.amount,
        delegate=_to_base58(raw.delegate) if raw.delegate_option else None,
        delegated_amount=raw.delegated_amount,
        is_initialized=raw.state != STATE_UNINITIALIZED,
        is_frozen=raw.state == STATE_FROZEN,
        is_native=bool(raw.is_native_option),
        rent_exempt_reserve=raw.is_native if raw.is_native_option else None,
        close_authority=_to_base58(raw.close_authority) if raw.close_authority_option else None,
        tlv_data=tlv_data,
    )


def get_account(client, address: str, commitment: Optional[str] = None, program_id: str = TOKEN_PROGRAM_ID) -> TokenAccountRecord:
    """Запрашивает аккаунт через RPC и разбирает его как token account. Ошибки RPC не перехватываются."""
    info = client.get_account_info(address, commitment=commitment)
    logger.debug(f"getAccountInfo {address}: {'нет аккаунта' if info is None else f'{len(info.data)} байт, owner {info.owner}'}")
    return unpack_account(address, info, program_id)
