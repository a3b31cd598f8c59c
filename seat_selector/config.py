import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Seat map (static, not runtime-editable)
ROWS = 8
COLS = 12
BASE_PRICE = 10
BOOKING_STORAGE_KEY = "sugarlandLastBooking"

# Pre-occupied seats (row-col codes)
OCCUPIED = frozenset({
    "A-5", "A-6", "A-7",
    "B-3", "B-4",
    "C-8", "C-9",
    "D-1", "D-2",
    "F-10", "F-11", "F-12",
})

# Sector definitions by column range, None means no restriction
SECTORS = {
    "all": None,
    "left": {"from": 1, "to": 4},
    "center": {"from": 5, "to": 8},
    "right": {"from": 9, "to": 12},
}
DEFAULT_SECTOR = "all"

# Row-based price adjustment: (last row index, delta from BASE_PRICE)
PRICE_TIERS = (
    (1, -2),
    (4, 1),
)

# Layout breakpoints in pixels
MOBILE_MAX_WIDTH = 540
TABLET_MAX_WIDTH = 900

# Runtime settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

BOOKING_STORE_BACKEND = os.getenv("BOOKING_STORE_BACKEND", "file").lower()
BOOKING_STORE_PATH = os.getenv("BOOKING_STORE_PATH", ".seat_selector/bookings.json")

AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
BOOKINGS_TABLE_NAME = os.getenv("BOOKINGS_TABLE_NAME")
