from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from base_counter.core import (
    celery,
    config,
    database,
    exception_handlers,
    redis,
)
from base_counter.core.middleware import auth_middleware
from base_counter.domains import counter, faucet, game, gift_box, ipfs, manifest, mints, social

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    celery.init_celery()
    await database.init_db()
    yield


app = FastAPI(title="Base Counter Backend", version=VERSION, lifespan=lifespan)

app.middleware("http")(auth_middleware)
exception_handlers.setup_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(counter.router, prefix="/api/counter", tags=["Counter"])
app.include_router(ipfs.router, prefix="/api/ipfs", tags=["IPFS"])
app.include_router(manifest.router, prefix="/.well-known", tags=["Manifest"])
app.include_router(game.router, prefix="/api/game", tags=["Game"])
app.include_router(mints.router, prefix="/api/mints", tags=["Mints"])
app.include_router(gift_box.router, prefix="/api/gift-box", tags=["Gift Box"])
app.include_router(faucet.router, prefix="/api/faucet", tags=["Faucet"])
app.include_router(social.router, prefix="/api/social", tags=["Social"])


@app.get("/health")
async def health():
    services = {
        "database": await database.check_connection(),
        "redis": await redis.check_connection(),
        "rabbitmq": await celery.check_connection(),
    }
    status = "healthy" if all(services.values()) else "degraded"
    return {
        "status": status,
        "services": services,
        "version": VERSION,
        "chain": "base",
    }
