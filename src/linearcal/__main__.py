"""Server entry point: python -m linearcal"""

import uvicorn

from linearcal.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "linearcal.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
