"""python -m solscribe — serve the API with uvicorn."""

import uvicorn

from solscribe.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("solscribe.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
