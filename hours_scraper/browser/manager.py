"""
Playwright-based fetcher for pages that build their hours with JavaScript.
Handles browser lifecycle; each fetch gets its own isolated context.
"""

from typing import Optional
from playwright.async_api import (
    async_playwright,
    Browser,
    Playwright,
    BrowserContext,
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
)

from ..errors import FetchError
from ..models import ExtractorConfig
from .fetcher import DocumentFetcher, validate_url


class BrowserFetcher(DocumentFetcher):
    """
    Render pages in headless Chromium and return the resulting HTML.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        super().__init__(config)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def start(self):
        """Initialize Playwright and launch browser."""
        if self._browser is not None:
            return

        self.logger.info("Starting browser...")

        try:
            self._playwright = await async_playwright().start()

            self._browser = await self._playwright.chromium.launch(
                headless=self.config.headless,
                args=[
                    '--disable-blink-features=AutomationControlled',
                    '--no-sandbox',
                    '--disable-dev-shm-usage',
                ]
            )

            self.logger.info(f"Browser launched (headless={self.config.headless})")

        except PlaywrightError as e:
            await self.stop()
            raise FetchError(f"Failed to start browser: {e}") from e

    async def stop(self):
        """Close browser and cleanup."""
        if self._browser:
            try:
                await self._browser.close()
            except PlaywrightError as e:
                self.logger.warning(f"Error closing browser: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except PlaywrightError as e:
                self.logger.warning(f"Error stopping playwright: {e}")
            self._playwright = None

    async def fetch(self, url: str) -> str:
        validate_url(url)

        if self._browser is None:
            async with self:
                return await self._render(url)

        return await self._render(url)

    async def _create_context(self) -> BrowserContext:
        context = await self._browser.new_context(
            user_agent=self.user_agent,
            viewport={'width': 1920, 'height': 1080},
            locale='en-US',
            accept_downloads=False,
        )
        context.set_default_timeout(self.config.page_timeout_ms)
        return context

    async def _render(self, url: str) -> str:
        context = await self._create_context()

        try:
            page = await context.new_page()
            self.logger.debug(f"Navigating to {url}")

            response = await page.goto(
                url,
                wait_until="domcontentloaded",
                timeout=self.config.page_timeout_ms
            )

            if response and response.status >= 400:
                raise FetchError(
                    f"Failed to fetch website: HTTP {response.status}",
                    url=url,
                    status=response.status
                )

            return await page.content()

        except PlaywrightTimeoutError as e:
            raise FetchError(f"Failed to fetch website: timeout loading {url}", url=url) from e
        except PlaywrightError as e:
            raise FetchError(f"Failed to fetch website: {e}", url=url) from e

        finally:
            await context.close()
