"""Unit test configuration - isolate from local env files and log directories"""

import os

# CRITICAL: Set env vars BEFORE importing porterstem.main
# main.py configures logging and reads limits at module level (on import)
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("MAX_BATCH_SIZE", "50")
os.environ.setdefault("MAX_WORD_LENGTH", "64")
