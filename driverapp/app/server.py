"""
Process entry point: serve the API with uvicorn on the configured port.
"""

import uvicorn

from driverapp.app.core.config import settings


def main():
    uvicorn.run(
        "driverapp.app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
