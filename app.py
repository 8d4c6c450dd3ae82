# ==============================================================
# Wi-Fi Login DFA gateway - entry point
# ==============================================================

from login_dfa.gateway.server import create_app
from login_dfa.utils.config import Settings

settings = Settings.from_env()
app = create_app(settings)


# ==============================================================
# Main Entry
# ==============================================================
if __name__ == '__main__':
    app.logger.info("Starting login DFA gateway on %s:%s", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
