"""Module entrypoint for running the invoice API server."""

import uvicorn

from invoicing.core.config import settings


def main() -> None:
    uvicorn.run(
        "invoicing.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
