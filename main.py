import os

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core import settings
from app.core import setup_logging
from app.core.lifespan import lifespan
from app.api.router import api_router
from app.core import register_exception_handlers

setup_logging()

ALLOWED_ORIGINS = settings.ALLOWED_ORIGINS.split(",")

app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, description=settings.DESCRIPTION,
              lifespan=lifespan)

register_exception_handlers(app)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Type"]
)

app.include_router(api_router)


# Root route
@app.get("/", include_in_schema=False)
async def root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME}"}


# Application entry point
if __name__ == "__main__":
    load_dotenv()
    uvicorn.run(
        "main:app",
        host=os.getenv('APP_HOST', '0.0.0.0'),
        port=int(os.getenv('APP_PORT', 8000)),
        reload=os.getenv('APP_RELOAD', 'False').lower() == 'true'
    )
