"""
Application configuration and settings
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Database Configuration
DB_USER = os.getenv("DB_USER", "postgres")
DB_PASS = os.getenv("DB_PASS", "password123")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "movies")
DATABASE_URL = (
    os.getenv("DATABASE_URL")
    or f"postgresql+psycopg2://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# S3 Configuration (credentials are picked up by boto3 from the environment)
S3_BUCKET_NAME = os.getenv("S3_BUCKET_NAME", "your-movie-media-bucket")
AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
MEDIA_DEFAULT_CATEGORY = os.getenv("MEDIA_DEFAULT_CATEGORY", "movies")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_DEFAULT_ORIGINS = (
    "http://localhost:3000,http://localhost:3001,http://localhost:5173,"
    "http://127.0.0.1:3000,http://127.0.0.1:3001,http://127.0.0.1:5173"
)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", _DEFAULT_ORIGINS).split(",")
    if origin.strip()
]


class Settings:
    PROJECT_NAME: str = "Movie Catalog API"
    VERSION: str = "1.0.0"
    DATABASE_URL = DATABASE_URL
    S3_BUCKET_NAME = S3_BUCKET_NAME
    AWS_REGION = AWS_REGION
    MEDIA_DEFAULT_CATEGORY = MEDIA_DEFAULT_CATEGORY
    HOST = HOST
    PORT = PORT
    LOG_LEVEL = LOG_LEVEL
    ALLOWED_ORIGINS = ALLOWED_ORIGINS

settings = Settings()
