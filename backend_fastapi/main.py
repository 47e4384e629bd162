import os
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.tasks import router as tasks_router
from infrastructure.logging_setup import setup_logging

# Load environment variables from .env file
load_dotenv()
setup_logging(os.getenv("LOG_LEVEL", "info"))

app = FastAPI(
    title="Daily Tasks API",
    description="Create, update, toggle, filter and search daily tasks.",
    version="0.1.0",
)

# Configure CORS for the frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:5173")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
)

register_exception_handlers(app)
app.include_router(tasks_router)
