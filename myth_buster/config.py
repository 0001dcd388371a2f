"""Configuration and settings for the Health Myth Buster."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).parent.parent

# API Keys
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")

# Model configs
CLAUDE_MODEL = "claude-sonnet-4-20250514"

# A catalog match must score strictly above this to beat the general result
MATCH_THRESHOLD = 2

# Verdict types
VERDICTS = [
    "True",
    "False",
    "Mixed",
    "Depends",
]
