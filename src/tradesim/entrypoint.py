"""Console entrypoint: serve the API with uvicorn."""

import uvicorn

from tradesim.config.settings import get_settings
from tradesim.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
