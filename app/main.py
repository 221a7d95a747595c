# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from api import routes

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(
    title="Specialization Recommendations",
    description="AI-powered specialization recommendations for students",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router)


@app.get("/")
async def root():
    return {
        "message": "Specialization recommendations client",
        "docs": "/docs",
        "recommendations": "/api/recommendations"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
