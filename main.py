import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import get_settings
from database import init_db, close_db
from routes.auth import router as auth_router
from routes.users import router as users_router
from routes.tags import router as tags_router
from routes.posts import router as posts_router
from routes.comments import router as comments_router
from routes.payments import router as payments_router
from routes.announcements import router as announcements_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # One MongoDB client for the life of the process
    init_db()
    logger.info("Post portal server started")
    yield
    close_db()

settings = get_settings()

app = FastAPI(title="Post Portal API", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

@app.get("/")
def read_root():
    return {"message": "Post pulse server is going on here...."}

# Include routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(tags_router)
app.include_router(posts_router)
app.include_router(comments_router)
app.include_router(payments_router)
app.include_router(announcements_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=not settings.production)
