import sys
from pathlib import Path

# Shared test helpers live beside the tests
TESTS_DIR = str(Path(__file__).resolve().parent)
if TESTS_DIR not in sys.path:
    sys.path.insert(0, TESTS_DIR)
