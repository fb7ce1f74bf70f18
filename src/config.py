"""Configuration for the ray tracer, read from environment variables."""

import os
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Paths
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", PROJECT_ROOT / "output"))

# Render settings
RENDER_WIDTH = int(os.getenv("RENDER_WIDTH", "512"))
RENDER_HEIGHT = int(os.getenv("RENDER_HEIGHT", "512"))
RENDER_WORKERS = int(os.getenv("RENDER_WORKERS", "0")) or None  # 0 means one per CPU
RENDER_QUALITY = os.getenv("RENDER_QUALITY", "high_quality")
MAX_LIGHT_BOUNCES = int(os.getenv("MAX_LIGHT_BOUNCES", "5"))

# Resolution scale per quality preset
QUALITY_LEVELS = {
    "interactive": {"scale": 0.5},
    "balanced": {"scale": 0.67},
    "high_quality": {"scale": 1.0},
}

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

__all__ = [
    "PROJECT_ROOT",
    "OUTPUT_DIR",
    "RENDER_WIDTH",
    "RENDER_HEIGHT",
    "RENDER_WORKERS",
    "RENDER_QUALITY",
    "MAX_LIGHT_BOUNCES",
    "QUALITY_LEVELS",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
