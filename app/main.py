from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes_health import router as health_router
from .api.search import router as search_router
from .core.db import create_db_and_tables

app = FastAPI(title="Music Search API", description="Artist and album name search")

# Enable CORS for local dev (frontend on Vite)
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Create tables if they don't exist
create_db_and_tables()

app.include_router(health_router)
app.include_router(search_router)
