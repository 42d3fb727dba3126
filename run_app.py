#!/usr/bin/env python3
"""
Soundfonter Application Launcher
"""
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Import and run the application
from soundfonter.main import main

if __name__ == "__main__":
    main()
