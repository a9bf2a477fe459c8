import sys
from pathlib import Path

# Make the package and the helpers importable without installing
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))
