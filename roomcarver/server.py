"""Development server bootstrap for the dungeon viewer."""

import logging
import os
from logging.handlers import RotatingFileHandler

from roomcarver import create_app


def configure_logging(log_dir: str):
    """Configure logging to both console and a rotating file in ``log_dir``.

    The file path will be ``<log_dir>/app.log``. Retains a few backups to avoid growth.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "app.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path


def start_server(host: str = "127.0.0.1", port: int = 5000, debug: bool = False):  # pragma: no cover (blocking)
    app = create_app()
    configure_logging(app.instance_path)
    logging.getLogger(__name__).info("Starting dungeon viewer on %s:%s", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
