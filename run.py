"""
Entry Point Script (Bootstrap)
==============================
Development runner that works without installing the package.

It is located outside the 'src' package and puts 'src' on sys.path so that
'from peptidescene...' resolves from a plain checkout.

Usage:
    $ python run.py ACDCK GCCKL -x "P1:C3-P2:C2"
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from peptidescene.main import main

if __name__ == "__main__":
    sys.exit(main())
