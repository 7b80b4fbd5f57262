"""
Centralized configuration settings for the music_tree_etl project.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# ==============================================================================
#  CORE PATH DEFINITIONS
# ==============================================================================
# Defines the project's directory structure for robust path management.

# The 'src' directory, which is the root for Python imports.
SRC_ROOT = Path(__file__).resolve().parents[1]

# The absolute root of the project (one level up from 'src').
PROJECT_ROOT = SRC_ROOT.parent

# Load environment variables from .env file located at the project root
load_dotenv(PROJECT_ROOT / ".env")

# Top-level directory for all pipeline inputs and outputs.
DATA_DIR = Path(os.getenv("MUSIC_TREE_DATA_DIR", PROJECT_ROOT / "data_volume"))

# Datasets
PATH_DATASETS = DATA_DIR / "datasets"

# Files offered for download
PATH_EXPORTS = DATA_DIR / "exports"

# ==============================================================================
#  EXPLICIT FILE PATHS
# ==============================================================================

# Raw library CSV. Falls back to SAMPLE_LIBRARY_CSV when the file is missing.
LIBRARY_CSV_FILE = Path(
    os.getenv("MUSIC_LIBRARY_CSV", PATH_DATASETS / "music_library.csv")
)

TRACKS_FILE = PATH_DATASETS / "library_tracks.jsonl"
LIBRARY_TREE_FILE = PATH_DATASETS / "library_tree.json"
LIBRARY_OUTLINE_FILE = PATH_DATASETS / "library_outline.txt"

EXPORT_FILENAME = "music-library.csv"
EXPORT_FILE = PATH_EXPORTS / EXPORT_FILENAME

# ==============================================================================
#  TREE CONSTANTS
# ==============================================================================

# Header names of the input CSV, in record field order.
CSV_COLUMNS = ("Artist", "TrackName", "Year", "Genre")

GENRE_SEPARATOR = ";"
NODE_ID_SEPARATOR = "-"

ROOT_NODE_ID = "root"
ROOT_NODE_LABEL = "Music Library"

# ==============================================================================
#  SAMPLE DATA
# ==============================================================================

SAMPLE_LIBRARY_CSV = """Artist,TrackName,Year,Genre
The Beatles,Hey Jude,1968,Rock;Pop
The Beatles,Let It Be,1970,Rock;Pop
Queen,Bohemian Rhapsody,1975,Rock
Queen,We Will Rock You,1977,Rock;Funk
Led Zeppelin,Kashmir,1975,Rock;Heavy Metal
Led Zeppelin,Stairway to Heaven,1971,Rock;Heavy Metal"""
