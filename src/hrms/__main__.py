from __future__ import annotations

import logging

from .main import create_app

logger = logging.getLogger("hrms.server")


def main() -> None:
    app = create_app()
    port = app.config["PORT"]

    # Startup URLs are printed regardless of LOG_LEVEL.
    logger.setLevel(logging.INFO)
    logger.info("HRMS Server running on http://localhost:%s", port)
    logger.info("API endpoints available at http://localhost:%s/api", port)

    app.run(host=app.config["HOST"], port=port, debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    main()
