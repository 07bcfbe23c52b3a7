from __future__ import annotations

import os

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from apps.api.routes.chat import router as chat_router
from apps.api.routes.pages import router as pages_router
from packages.core.config import load_env_file
from packages.core.logging_config import configure_logging
from packages.core.observability import init_tracing


load_env_file()
configure_logging()

init_tracing("agent-lab.api")
app = FastAPI(title="Menu Assistant API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
FastAPIInstrumentor.instrument_app(app)
app.include_router(pages_router)
app.include_router(chat_router)


def main() -> None:
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "1105")),
    )


if __name__ == "__main__":
    main()
