import logging
import sys

import uvicorn

from albumshop.config import settings

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def run_api() -> None:
    _setup_logging()

    from albumshop.web.main import ROUTES, app

    logger.info("Album API is running on http://%s:%s", settings.api_host, settings.api_port)
    for method, path, summary in ROUTES:
        logger.info("%-6s %-14s - %s", method, path, summary)

    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


def run_viewer() -> None:
    _setup_logging()

    from albumshop.viewer.main import app

    logger.info(
        "Album browser on http://%s:%s (api=%s, storage=%s)",
        settings.viewer_host,
        settings.viewer_port,
        settings.api_base_url,
        settings.storage_path,
    )
    uvicorn.run(app, host=settings.viewer_host, port=settings.viewer_port, log_level=settings.log_level.lower())


def main(argv=None) -> None:
    args = sys.argv[1:] if argv is None else argv
    target = args[0] if args else "api"
    if target == "api":
        run_api()
    elif target == "viewer":
        run_viewer()
    else:
        raise SystemExit(f"usage: python -m albumshop.main [api|viewer], got {target!r}")


if __name__ == "__main__":
    main()
