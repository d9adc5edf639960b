"""Run the backend with ``python -m sessionauth``."""

import uvicorn

from sessionauth.config import settings


def main() -> None:
    uvicorn.run(
        "sessionauth.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
