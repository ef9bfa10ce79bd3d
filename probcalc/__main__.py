import logging

import uvicorn

from .config import get_settings

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("starting probcalc-web on %s", settings.bind)
    uvicorn.run("probcalc.api:app", host=settings.host, port=settings.port,
                log_level=settings.log_level.lower(), reload=False)


if __name__ == "__main__":
    main()
