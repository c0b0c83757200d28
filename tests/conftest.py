import sys
from pathlib import Path


ROOT_PATH = Path(__file__).resolve().parents[1]
for path in (ROOT_PATH / "src", ROOT_PATH):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)
