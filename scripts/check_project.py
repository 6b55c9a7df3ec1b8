#!/usr/bin/env python3
"""
Run only the project endpoint check (prints the closing summary too).
Usage: python scripts/check_project.py
"""
import os
import sys

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mcp_check import check_project_endpoint, setup_logging

setup_logging()
check_project_endpoint()
