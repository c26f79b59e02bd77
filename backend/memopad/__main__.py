"""
MemoPad Backend — Server Entry Point
======================================

What:  Runs the API under uvicorn using the configured host, port and log level.
Who:   `python -m memopad` or the `memopad` console script.
"""

import uvicorn

from memopad.config import settings


def main() -> None:
    uvicorn.run(
        "memopad.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
