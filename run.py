"""
Entry Point Script (Bootstrap)
==============================
Starting point for development runs from a source checkout.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so 'from usablearea...' resolves without an install.

Usage:
    $ python run.py --size 0.9 0.9 --lock --set-size-x 0.5
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from usablearea.main import main

if __name__ == "__main__":
    sys.exit(main())
