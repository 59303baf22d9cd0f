#!/usr/bin/env python3
"""
Development server launcher for the Office Hours Helper API.

This script starts the FastAPI server with appropriate settings for development.
For production, you'd use a proper ASGI server deployment.
"""

import uvicorn
from pathlib import Path
from dotenv import load_dotenv

project_root = Path(__file__).parent
src_path = project_root / "src"

if __name__ == "__main__":
    # OPENAI_API_KEY / OPENAI_MODEL / DEBUG_ERRORS from .env
    load_dotenv(project_root / ".env")

    print("Starting Office Hours Helper API Development Server")
    print("Server will be available at: http://localhost:8000")
    print("API documentation at: http://localhost:8000/docs")
    print("\n" + "="*50 + "\n")

    uvicorn.run(
        "officehours.api.main:app",
        host="0.0.0.0",  # Accept connections from any IP
        port=8000,
        reload=True,     # Auto-reload on code changes (development only)
        reload_dirs=[str(src_path)],  # Only watch src directory
        log_level="info"
    )
