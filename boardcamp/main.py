import uvicorn

from boardcamp.app_factory import create_app
from boardcamp.core.config import Settings

settings = Settings()
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
