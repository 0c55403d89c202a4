from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from research.constants import CORS_ORIGINS

from .router_model_config import router as model_config_router

app = FastAPI(title="Research Model Configuration", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(model_config_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
