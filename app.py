import logging
import os

from profile_browser.logging_config import configure_logging
from profile_browser.startup import ensure_required_packages, find_free_port

configure_logging()
ensure_required_packages()

from profile_browser.ui.dash_app import create_dash_app  # noqa: E402

logger = logging.getLogger("profile_browser.app")

CONFIG_ROOT = os.getenv("PROFILE_BROWSER_CONFIG", "config")

app = create_dash_app(CONFIG_ROOT)
server = app.server


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8051"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning(
            "Preferred port taken, using another",
            extra={"preferred_port": preferred_port, "port": port},
        )
    logger.info("Starting profile browser", extra={"config_root": CONFIG_ROOT, "port": port, "debug": debug})

    app.run(host="0.0.0.0", port=port, debug=debug)
