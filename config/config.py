import os
from dotenv import load_dotenv

# Загружаем переменные из config/.env
dotenv_path = os.path.join(os.path.dirname(__file__), '.env')
load_dotenv(dotenv_path=dotenv_path)


def parse_address_list(raw: str) -> list:
    """Разбивает строку адресов через запятую, убирая пробелы и пустые элементы."""
    return [a.strip() for a in raw.split(",") if a.strip()]


# --- RPC ---
SOLANA_RPC_URL = os.getenv("SOLANA_RPC_URL", "https://api.devnet.solana.com").strip()
SOLANA_COMMITMENT = os.getenv("SOLANA_COMMITMENT", "confirmed").strip().lower()
RPC_TIMEOUT = float(os.getenv("RPC_TIMEOUT", "30"))

VALID_COMMITMENTS = ("processed", "confirmed", "finalized")

# --- Программы ---
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
TOKEN_2022_PROGRAM_ID = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
ASSOCIATED_TOKEN_PROGRAM_ID = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"

TOKEN_PROGRAMS = {
    "spl-token": TOKEN_PROGRAM_ID,
    "token-2022": TOKEN_2022_PROGRAM_ID,
}

# --- Проверяемые ATA ---
DEFAULT_ATA_ADDRESSES = [
    "ASkpsRKwGKbUmmMrdknqnHVrmxsU8Ws6qeX5iE6AUERK",
    "73weDmPbP1pjZyshM47xiUV6pSadjoZPEtHeczAmNE7P",
    "HkuaPeSMog2jbGMYm7vjPFSaheM69PS1VXoioTp25sxS",
]
ATA_ADDRESSES = parse_address_list(os.getenv("ATA_ADDRESSES", "")) or list(DEFAULT_ATA_ADDRESSES)

LOG_DIR = os.getenv("LOG_DIR", "logs")
