import logging
import requests
from typing import Optional, Dict, Any

import config.config as app_config
from rpc.models import AccountInfo


class RPCError(Exception):
    """Ошибка, возвращённая узлом в поле "error" JSON-RPC ответа."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code


class RPCTransportError(RPCError):
    """Сетевая/HTTP ошибка или невалидный JSON в ответе."""
    pass


# --- RPCClient ---
class RPCClient:
    """
    Минимальный JSON-RPC клиент Solana поверх requests.

    Без повторов и без ограничения частоты: каждая ошибка сразу
    пробрасывается вызывающему коду.
    """

    def __init__(self, rpc_url: Optional[str] = None, commitment: Optional[str] = None, timeout: Optional[float] = None):
        self.rpc_url = rpc_url or app_config.SOLANA_RPC_URL
        self.commitment = commitment or app_config.SOLANA_COMMITMENT
        self.timeout = timeout if timeout is not None else app_config.RPC_TIMEOUT
        self.logger = logging.getLogger("rpc.client")

    def _make_request(self, payload: dict) -> Any:
        method_name = payload.get('method', 'unknown')
        self.logger.debug(f"-> {method_name} {payload.get('params')}")

        try:
            resp = requests.post(self.rpc_url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            json_resp = resp.json()
        except requests.RequestException as e:
            self.logger.warning(f"Сетевая ошибка при выполнении {method_name}: {e}")
            raise RPCTransportError(str(e)) from e
        except ValueError as e:
            self.logger.warning(f"Невалидный JSON в ответе на {method_name}: {e}")
            raise RPCTransportError(f"Invalid JSON response: {e}") from e

        if not isinstance(json_resp, dict):
            self.logger.warning(f"Неожиданный ответ на {method_name}: {json_resp!r}")
            raise RPCTransportError(f"Unexpected response to {method_name}: {type(json_resp).__name__}")

        if "error" in json_resp:
            error = json_resp.get('error') or {}
            if not isinstance(error, dict):
                error = {'message': str(error)}
            error_code = error.get('code')
            error_message = error.get('message', 'unknown')
            self.logger.warning(f"RPC Error при выполнении {method_name}: код {error_code}, сообщение: {error_message}")
            raise RPCError(error_message, code=error_code)

        if "result" not in json_resp:
            raise RPCTransportError(f"В ответе на {method_name} нет поля result")
        return json_resp['result']

    def get_account_info(self, address: str, commitment: Optional[str] = None) -> Optional[AccountInfo]:
        """Возвращает AccountInfo или None, если по адресу нет аккаунта."""
        payload = {
            "jsonrpc": "2.0", "id": 1, "method": "getAccountInfo",
            "params": [address, {"encoding": "base64", "commitment": commitment or self.commitment}]
        }
        result = self._make_request(payload)
        value = (result or {}).get('value')
        if value is None:
            return None
        return AccountInfo.model_validate(value)

    def get_version(self) -> Dict[str, Any]:
        payload = {"jsonrpc": "2.0", "id": 1, "method": "getVersion"}
        return self._make_request(payload)
