# run_uvicorn.py
# Launcher used for local runs and debugging (no uvicorn reload subprocess).
import os
from dotenv import load_dotenv

load_dotenv()

# Safe defaults so the app starts without a .env; reads fall back to the seed movies.
os.environ.setdefault("DATABASE_URL", "sqlite:///./dev_local.db")
os.environ.setdefault("S3_BUCKET_NAME", "your-movie-media-bucket")

from movie_catalog.core.config import settings  # noqa: E402
from movie_catalog.main import app  # noqa: E402

if __name__ == "__main__":
    import uvicorn
    # reload=False so uvicorn does not spawn a reloader subprocess
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, reload=False)
