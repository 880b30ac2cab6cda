import os
import sys

# Allow running the suite from a source checkout without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
