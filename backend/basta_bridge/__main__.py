"""Run the bridge under uvicorn."""

import uvicorn

from basta_bridge.config import get_settings
from basta_bridge.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
