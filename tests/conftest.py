import struct

import base58
import pytest

from rpc.models import AccountInfo

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
WSOL_MINT = "So11111111111111111111111111111111111111112"
WALLET = "HkuaPeSMog2jbGMYm7vjPFSaheM69PS1VXoioTp25sxS"
DELEGATE = "73weDmPbP1pjZyshM47xiUV6pSadjoZPEtHeczAmNE7P"


def pack_token_account(mint=USDC_MINT, owner=WALLET, amount=0, delegate=None, state=1,
                       is_native=None, delegated_amount=0, close_authority=None) -> bytes:
    """Собирает 165 байт SPL token account вручную, без layout из decoder."""
    def key(address):
        return base58.b58decode(address) if address else bytes(32)

    data = (
        key(mint)
        + key(owner)
        + struct.pack("<Q", amount)
        + struct.pack("<I", 1 if delegate else 0)
        + key(delegate)
        + struct.pack("<B", state)
        + struct.pack("<I", 0 if is_native is None else 1)
        + struct.pack("<Q", is_native or 0)
        + struct.pack("<Q", delegated_amount)
        + struct.pack("<I", 1 if close_authority else 0)
        + key(close_authority)
    )
    assert len(data) == 165
    return data


@pytest.fixture
def token_account_data():
    return pack_token_account


@pytest.fixture
def make_account_info():
    def _make(data: bytes, owner: str = TOKEN_PROGRAM_ID, lamports: int = 2039280) -> AccountInfo:
        return AccountInfo(lamports=lamports, owner=owner, data=data, space=len(data))
    return _make
