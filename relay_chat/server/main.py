"""FastAPI application entrypoint for the chat relay."""
import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import messages, schemas, users, ws
from .config import CORS_ORIGINS, HOST, PORT
from .deps import get_hub
from .hub import BroadcastHub
from .logging_config import configure_logging

logger = configure_logging()


def create_app() -> FastAPI:
    app = FastAPI(title="Relay Chat Server", version="1.0.0")
    app.state.hub = BroadcastHub()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST"],
    )
    app.include_router(users.router)
    app.include_router(messages.router)
    app.include_router(ws.router)

    @app.get("/health", response_model=schemas.HealthOut)
    async def health(hub: BroadcastHub = Depends(get_hub)):
        return schemas.HealthOut(**hub.stats())

    return app


app = create_app()


def run() -> None:
    logger.info("SERVER_START host=%s port=%s", HOST, PORT)
    uvicorn.run("relay_chat.server.main:app", host=HOST, port=PORT, reload=False)


if __name__ == "__main__":
    run()
