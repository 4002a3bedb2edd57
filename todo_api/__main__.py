import uvicorn

from todo_api.config import settings


def main() -> None:
    uvicorn.run(
        "todo_api.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
