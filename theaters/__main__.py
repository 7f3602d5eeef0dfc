import uvicorn

from .config import settings


def main() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    uvicorn.run(
        "theaters.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
