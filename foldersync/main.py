import uvicorn

from foldersync.configs.setup import create_app
from foldersync.configs.settings import settings

app = create_app()


def run() -> None:
    uvicorn.run(
        "foldersync.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.APP_ENV == "dev",
    )


if __name__ == "__main__":
    run()
