import os
import dotenv

# Load environment variables from .env file
dotenv.load_dotenv()

# Google AI Configuration
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image-preview")

# Optional content-safety threshold applied to every harm category,
# e.g. BLOCK_ONLY_HIGH, BLOCK_MEDIUM_AND_ABOVE. Unset means the service defaults.
SAFETY_THRESHOLD = os.getenv("SAFETY_THRESHOLD") or None

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "adblend.log")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# CORS Origins
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost,http://localhost:3000,http://127.0.0.1,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]
