#!/usr/bin/env python3

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from turnduel.console import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    finally:
        print("\nThanks for playing!")
