import logging

from relay.controller import create_app
from relay.constants import APP_PORT, DEBUG_MODE


logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("relay")

app = create_app()

if __name__ == '__main__':
    logger.info("Server listening on port %s", APP_PORT)
    # Falha no bind (OSError) não é tratada: encerra o processo
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE, use_reloader=False)
