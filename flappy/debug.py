"""flappy/debug.py — Debug flag from environment variable."""

import os

DEBUG = os.environ.get("FLAPPY_DEBUG", "") == "1"
