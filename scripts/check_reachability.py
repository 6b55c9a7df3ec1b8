#!/usr/bin/env python3
"""
Run only the MCP server reachability check.
Usage: python scripts/check_reachability.py
Picks up SUPABASE_ANON_KEY from the environment (or .env file).
"""
import os
import sys

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mcp_check import check_server_reachability, setup_logging

setup_logging()
check_server_reachability()
