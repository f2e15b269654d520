#!/usr/bin/env python
"""Script to run the TaskFlow API server."""
import os
import sys
from pathlib import Path

# Get the directory where this script is located
project_dir = Path(__file__).resolve().parent

# Add project directory to Python path
sys.path.insert(0, str(project_dir))

# Change to project directory so the default SQLite file lands here
os.chdir(project_dir)

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "taskflow.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
