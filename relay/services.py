import logging
from typing import Optional

import requests

from .constants import DEBUG_MODE, DISCORD_SUCCESS_STATUSES

logger = logging.getLogger(__name__)


class NotificationError(RuntimeError):
    """Falha ao entregar a mensagem ao webhook do Discord."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def send_discord_message(webhook_url, content):
    """
    Envia ``content`` ao webhook do Discord em um único POST, sem retry.

    Retorna a resposta quando o Discord aceita (200/204). Qualquer outro status,
    erro de transporte ou URL não configurada levanta NotificationError.
    """
    if not webhook_url:
        raise NotificationError("DISCORD_WEBHOOK_URL não configurada")

    logger.debug("Enviando mensagem com %d caracteres ao Discord", len(content))
    try:
        resp = requests.post(webhook_url, json={"content": content})
    except requests.RequestException as exc:
        raise NotificationError(f"falha de transporte ao enviar para o Discord: {exc}") from exc

    if DEBUG_MODE:
        print(f"[DEBUG] Discord response: {resp.status_code}")
        if resp.status_code != 204:
            print(f"[DEBUG] Response content: {resp.text}")

    if resp.status_code not in DISCORD_SUCCESS_STATUSES:
        raise NotificationError(
            f"failed to send message to Discord, status code: {resp.status_code}",
            status_code=resp.status_code,
        )
    return resp
