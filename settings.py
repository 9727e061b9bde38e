# settings.py
import os

from dotenv import load_dotenv

# .env next to the project root, if present
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
load_dotenv(os.path.join(BASE_DIR, ".env"))

DATA_DIR = os.getenv("HOTEL_DATA_DIR", ".")
LOG_LEVEL = os.getenv("HOTEL_LOG_LEVEL", "INFO").upper()
SEED_ROOMS = os.getenv("HOTEL_SEED_ROOMS", "false").lower() == "true"

FLASK_HOST = os.getenv("FLASK_HOST", "127.0.0.1")
FLASK_PORT = int(os.getenv("FLASK_PORT", "5000"))
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"

ROOMS_FILE = "rooms.txt"
GUESTS_FILE = "guests.txt"
BOOKINGS_FILE = "bookings.txt"
