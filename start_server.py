#!/usr/bin/env python3
"""
Entry point for the Campus Energy Manager API.

Runs the FastAPI app with uvicorn on $PORT (default 8000).
"""
import os
import sys

# Add the project root to the Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from campus_energy.main import app

# Export the FastAPI app for ASGI hosts
handler = app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", 8000)))
