import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from routes import habits, suggestions, goals
from core.config import settings
from core.logging import configure_logging
from core.scheduler import start_scheduler, stop_scheduler

configure_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.ENABLE_SCHEDULER:
        start_scheduler()
    yield
    stop_scheduler()

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

logger.info("Allowing frontend origin %s", settings.FRONTEND_URL)

# CORS
origins = [
    settings.FRONTEND_URL,
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000", # Common alternative
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(habits.router)
app.include_router(suggestions.router)
app.include_router(goals.router)

@app.get("/")
def read_root():
    return {"message": "Welcome to HabitQuest API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
