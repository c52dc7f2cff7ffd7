from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordscope.api import history, lookup
from wordscope.database import engine
from wordscope.models import Base


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield


app = FastAPI(title="Wordscope", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_methods=["GET", "DELETE"],
    allow_headers=["*"],
)

app.include_router(lookup.router)
app.include_router(history.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
