# mylife/main.py
import logging
import os
import uvicorn
from fastapi import FastAPI
from mylife.routers.auth_router import router as auth_router
from mylife.routers.user_router import router as user_router
from mylife.routers.post_router import router as post_router
from mylife.infrastructure.database import init_db
from mylife.middleware.error_handlers import register_exception_handlers
from mylife.middleware.logging import RequestIdMiddleware
import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

def configure_structlog():
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, LOG_LEVEL, logging.INFO)),
        context_class=dict,
    )

configure_structlog()
logger = structlog.get_logger()

app = FastAPI(title="MyLife")

app.add_middleware(RequestIdMiddleware)
register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(post_router)

@app.on_event("startup")
async def on_startup():
    await init_db()
    logger.info("app_startup")

if __name__ == "__main__":
    uvicorn.run("mylife.main:app", host="0.0.0.0", port=int(os.getenv("PORT", 8000)), reload=True)
