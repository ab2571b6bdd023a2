#!/usr/bin/env python3
"""
Generate the static API documentation bundle into docs/.
"""
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from land_api.docs import main

if __name__ == "__main__":
    main()
