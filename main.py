"""Payback API. Run locally with: python main.py or uvicorn main:app --reload."""
from pathlib import Path

from dotenv import load_dotenv

# Load .env before payback reads PAYBACK_* settings
load_dotenv(Path(__file__).resolve().parent / ".env")

from payback.api import app  # noqa: E402

if __name__ == "__main__":
    import os
    import uvicorn
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
