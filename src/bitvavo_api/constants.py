"""
Constants for the Bitvavo client.
"""

# API Configuration
DEFAULT_BASE_URL = "https://api.bitvavo.com"
API_PREFIX = "/v2"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "bitvavo-api-python/0.1"

# Authentication headers
ACCESS_KEY_HEADER = "Bitvavo-Access-Key"
ACCESS_TIMESTAMP_HEADER = "Bitvavo-Access-Timestamp"
ACCESS_SIGNATURE_HEADER = "Bitvavo-Access-Signature"
ACCESS_WINDOW_HEADER = "Bitvavo-Access-Window"
MAX_ACCESS_WINDOW = 60000  # milliseconds

# HTTP Status Codes
SUCCESS_STATUS_CODE = 200
ERROR_STATUS_CODE = 500
