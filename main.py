import logging

from core import config
from core.config import validate_config, build_settings
from server.app import RssServer


logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s %(message)s")
log = logging.getLogger("rubenrss")


def main() -> None:
    validate_config()
    settings = build_settings()
    server = RssServer(settings)
    log.info(
        "Serveur demarre sur :%d (GET http://localhost:%d%s) source=%s",
        config.LISTEN_PORT, config.LISTEN_PORT, settings.route, settings.blog_url,
    )
    server.run(host=config.LISTEN_HOST, port=config.LISTEN_PORT)


if __name__ == "__main__":
    main()
