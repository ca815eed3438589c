
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auction_lint import __version__
from auction_lint.api.routers import artist_detection, spellcheck
from auction_lint.config import settings


app = FastAPI(
    title=settings.app_name,
    description="Flag misplaced artist names and misspellings in auction catalog text",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(artist_detection.router, prefix="/api/v1", tags=["artist-detection"])
app.include_router(spellcheck.router, prefix="/api/v1", tags=["spellcheck"])


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
