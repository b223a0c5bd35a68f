"""Hourglass CLI - Command-line interface for Hourglass settings.

Main entry point is in main.py.

Usage:
    python -m hourglass          # Run CLI
"""
