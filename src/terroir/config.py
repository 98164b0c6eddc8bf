"""
Terroir Configuration
Centralized settings for the application
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Alternate catalog JSON (defaults to the packaged catalog when unset)
CATALOG_PATH = os.getenv("TERROIR_CATALOG_PATH") or None

# Logging
LOG_LEVEL = os.getenv("TERROIR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
