import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, settings
from .api.endpoints import classifications, datasets, hyperparameters, metrics

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="ModelHub", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# /api/models/metrics and /api/models/train must match before /{category}/...
app.include_router(metrics.router)
app.include_router(hyperparameters.router)
app.include_router(classifications.router)
app.include_router(datasets.router)


@app.get("/")
async def root():
    return {"message": "ModelHub API", "version": __version__}


if __name__ == "__main__":
    logger.info("Starting ModelHub API on port 8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
