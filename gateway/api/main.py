"""
HTTP server entrypoint for the inference gateway.

Runs `gateway.api.http_api:app` under uvicorn. Bind address comes from
`HOST`/`PORT` (default `0.0.0.0:3000`).
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os

import uvicorn

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def main():
    logging.basicConfig(
        level=logging.DEBUG if os.getenv("DEBUG") == "true" else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = os.getenv("HOST", DEFAULT_HOST)
    port = int(os.getenv("PORT", DEFAULT_PORT))

    logging.getLogger(__name__).info("Starting gateway on %s:%d", host, port)
    uvicorn.run("gateway.api.http_api:app", host=host, port=port)


if __name__ == "__main__":
    main()
