"""Run the API with uvicorn: ``python -m cloud_saas``."""
import uvicorn

from .main import app
from .core.config import Settings


def run() -> None:
    settings = app.state.container.get(Settings)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
