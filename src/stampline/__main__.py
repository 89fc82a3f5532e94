"""Allow running the package with python -m stampline (same as the stampline console script)."""
from stampline.main import main
import sys
sys.exit(main())
