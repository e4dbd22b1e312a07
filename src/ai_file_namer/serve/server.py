"""Helper to launch the FastAPI app under uvicorn from Python."""
from __future__ import annotations
import os
import subprocess
import sys

def main() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = os.getenv("PORT", "8000")

    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "ai_file_namer.serve.fastapi_app:app",
        "--host", host,
        "--port", str(port),
    ]
    subprocess.run(cmd, check=True)

if __name__ == "__main__":
    main()
