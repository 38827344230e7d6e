import logging

from flask import Flask, request

from .constants import (
    DEBUG_MODE,
    DISCORD_WEBHOOK_URL,
    RESPONSE_BAD_REQUEST,
    RESPONSE_OK,
    RESPONSE_SERVER_ERROR,
    SERVICE_NAME,
    WEBHOOK_PATH,
)
from .events import PayloadError, parse_gitlab_event
from .formatters import format_event
from .services import NotificationError, send_discord_message

logger = logging.getLogger(__name__)

TEXT_HEADERS = {'Content-Type': 'text/plain; charset=utf-8'}


def create_app(webhook_url=None):
    """
    Cria o Flask app do relay.

    ``webhook_url`` sobrescreve DISCORD_WEBHOOK_URL; o valor é fixado aqui e
    usado em todas as requisições do processo.
    """
    app = Flask(__name__)
    destination_url = DISCORD_WEBHOOK_URL if webhook_url is None else webhook_url
    if not destination_url:
        logger.warning("DISCORD_WEBHOOK_URL não configurada: todas as notificações vão falhar")

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    @app.route(WEBHOOK_PATH, methods=['POST'])
    def gitlab_webhook():
        try:
            event = parse_gitlab_event(request.get_data())
        except PayloadError as exc:
            logger.warning("Payload inválido recebido: %s", exc)
            return RESPONSE_BAD_REQUEST, 400, TEXT_HEADERS

        if DEBUG_MODE:
            print(f"[DEBUG] Received event: object_kind={event.object_kind!r} kind={event.kind.value}")

        message = format_event(event)

        try:
            send_discord_message(destination_url, message)
        except NotificationError as exc:
            logger.error("Error sending to Discord: %s", exc)
            return RESPONSE_SERVER_ERROR, 500, TEXT_HEADERS

        return RESPONSE_OK, 200, TEXT_HEADERS

    return app
