from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from .core.events import shutdown_event, startup_event
from .routes import health, leaderboard, members

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event()
    yield
    await shutdown_event()

def create_app(use_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        default_response_class=ORJSONResponse,
        title="Leaderboard Service",
        description="Ranked leaderboards on Redis sorted sets",
        version="1.0.0",
        lifespan=lifespan if use_lifespan else None
    )
    app.include_router(health.router)
    app.include_router(leaderboard.router)
    app.include_router(members.router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rankboard.main:app",
        host="0.0.0.0",
        port=8000,
        workers=4,
        loop="uvloop",
        http="httptools",
        log_level="info"
    )
