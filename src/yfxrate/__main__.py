# src/yfxrate/__main__.py
import sys

from yfxrate.app import main

sys.exit(main())
