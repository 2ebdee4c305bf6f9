import logging

import uvicorn

from .app import create_app
from .core.config import Config


def main() -> None:
    config = Config.from_env()
    config.validate()

    # Configure logging
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )

    app = create_app(config)
    settings = app.state.config
    uvicorn.run(app, host=settings.get_string("server.host"), port=settings.get_int("server.port"))


if __name__ == "__main__":
    main()
