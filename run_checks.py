import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from hostcheck.cli import main

if __name__ == "__main__":
    sys.exit(main())
