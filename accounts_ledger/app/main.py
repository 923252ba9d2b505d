from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router
from .core.config import get_settings
from .core.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

app.include_router(accounts_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}
