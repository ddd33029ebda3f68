"""Application entry point for the blog list backend server."""

from bloglist.app import App
from bloglist.config import Config
from bloglist.logging import setup_logging
from bloglist.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
