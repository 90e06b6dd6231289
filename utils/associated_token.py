import base58
from solders.pubkey import Pubkey

from config.config import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

PUBKEY_LENGTH = 32


def is_valid_address(address) -> bool:
    """Проверяет, что строка в base58 и декодируется ровно в 32 байта."""
    if not isinstance(address, str) or not address:
        return False
    # b58decode сам обрезает пробелы, а RPC получит строку как есть
    if address != address.strip():
        return False
    try:
        return len(base58.b58decode(address)) == PUBKEY_LENGTH
    except ValueError:
        return False


def _to_pubkey(address: str, name: str) -> Pubkey:
    if not is_valid_address(address):
        raise ValueError(f"Некорректный адрес {name}: {address!r}")
    return Pubkey.from_string(address)


def get_associated_token_address(owner: str, mint: str, token_program_id: str = TOKEN_PROGRAM_ID) -> str:
    """
    Вычисляет адрес Associated Token Account для пары owner + mint.

    PDA с seeds [owner, token_program_id, mint] под программой
    Associated Token Account.
    """
    owner_key = _to_pubkey(owner, "owner")
    mint_key = _to_pubkey(mint, "mint")
    program_key = _to_pubkey(token_program_id, "token program")
    ata, _bump = Pubkey.find_program_address(
        [bytes(owner_key), bytes(program_key), bytes(mint_key)],
        Pubkey.from_string(ASSOCIATED_TOKEN_PROGRAM_ID),
    )
    return str(ata)
