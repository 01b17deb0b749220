"""
Run the service: python -m pitico_app
"""

import uvicorn

from pitico_app.config import settings


def main():
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
