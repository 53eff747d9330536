"""Run the browser against the demo project: ``python -m cloudbrowse``."""

from __future__ import annotations

import logging
import os

from cloudbrowse.app import CloudBrowserApp
from cloudbrowse.controllers.static.demo import demo_controller


def main() -> None:
    log_file = os.environ.get("CLOUDBROWSE_LOG")
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    CloudBrowserApp(demo_controller()).run()


if __name__ == "__main__":
    main()
