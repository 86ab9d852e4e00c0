import os

API_URL = os.getenv("API_URL", "http://localhost:8000")

APP_NAME = "Aerospike Console"

PAGE_SIZES = [10, 20, 50, 100]
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))

SCAN_MAX_RECORDS = int(os.getenv("SCAN_MAX_RECORDS", "100"))  # scan and search caps

DEFAULT_EDITOR_WIDTH = 500  # px
MIN_EDITOR_WIDTH = 300
MAX_EDITOR_WIDTH = 800

DEFAULT_AEROSPIKE_HOST = os.getenv("AEROSPIKE_HOST", "localhost")
DEFAULT_AEROSPIKE_PORT = int(os.getenv("AEROSPIKE_PORT", "3000"))
