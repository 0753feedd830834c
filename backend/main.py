# backend/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import init_store
from routes.users import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Build and seed the in-memory store once per process
init_store()

app = FastAPI(title=settings.APP_NAME, version="1.0.0")

# CORS Configuration
# The frontend is hosted separately, so every origin is accepted
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Router registration
app.include_router(users_router)

@app.get("/")
def read_root():
    return "Users Service is Running!"
