import os

# Configurações globais de ambiente (lidas uma única vez no start do processo)
DISCORD_WEBHOOK_URL = os.getenv("DISCORD_WEBHOOK_URL", "")
APP_PORT = int(os.getenv("APP_PORT", "4455"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

WEBHOOK_PATH = "/gitlab-webhook"
SERVICE_NAME = "gitlab-discord-relay"

# Prefixo usado pelo GitLab em refs de tag (push de tag chega como object_kind=push)
TAG_REF_PREFIX = "refs/tags/"

# Status aceitos como sucesso pelo webhook do Discord
DISCORD_SUCCESS_STATUSES = (200, 204)

# Respostas em texto puro devolvidas ao GitLab
RESPONSE_OK = "Webhook processed successfully\n"
RESPONSE_BAD_REQUEST = "Bad Request\n"
RESPONSE_SERVER_ERROR = "Internal Server Error\n"

UNHANDLED_EVENT_MESSAGE = "Unhandled event type"
