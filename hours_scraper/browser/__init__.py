"""
Page retrieval: plain HTTP via httpx, rendered pages via Playwright.

BrowserFetcher lives in .manager and is imported on demand, so Playwright
is only loaded when rendering is requested.
"""

from .fetcher import DocumentFetcher, HttpFetcher, create_fetcher, validate_url

__all__ = [
    'DocumentFetcher',
    'HttpFetcher',
    'create_fetcher',
    'validate_url',
]
