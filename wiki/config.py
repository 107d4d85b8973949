import os

from dotenv import load_dotenv

load_dotenv()

# Database
DB_PATH = os.getenv("WIKI_DB_PATH", "db/wiki.sqlite3")
DATABASE_URL = f"sqlite:///{DB_PATH}"
POOL_SIZE = int(os.getenv("WIKI_POOL_SIZE", 33))

# Web service
HOST = os.getenv("WIKI_HOST", "0.0.0.0")
PORT = int(os.getenv("WIKI_PORT", 8080))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
