#!/usr/bin/env python3
"""
Business Hours Extractor
Main entry point for the extractor.
"""

from hours_scraper.cli import main

if __name__ == "__main__":
    main()
