"""
Banner Capture Service
Screenshots the server-rendered banner page with a headless Chromium.

One browser process is launched per capture and closed when the capture ends,
whether it succeeded or not.
"""
import logging
from urllib.parse import urlencode

from django.conf import settings
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

logger = logging.getLogger(__name__)

BANNER_SELECTOR = '#banner'
CODE_SELECTOR = '#code'
LOGO_SELECTOR = '#company-logo'

VIEWPORT = {'width': 1584, 'height': 396}

QUALITY_CSS = """
#banner, #banner * {
  -webkit-font-smoothing: antialiased !important;
  -moz-osx-font-smoothing: grayscale !important;
  text-rendering: optimizeLegibility !important;
  image-rendering: -webkit-optimize-contrast !important;
}
"""

LOGO_READY_JS = """() => {
  const img = document.getElementById('company-logo');
  return img ? img.complete && img.naturalWidth > 0 : true;
}"""

CODE_READY_JS = """() => {
  const code = document.getElementById('code');
  return code !== null && code.innerHTML.trim().length > 0;
}"""


class BannerCaptureError(Exception):
    """
    Raised when the banner could not be captured. No partial image is kept.
    """


class BannerCaptureService:
    """
    Capture the banner render page as a PNG.

    ``playwright_factory`` defaults to ``sync_playwright``; tests pass a fake.
    """

    def __init__(self, playwright_factory=None):
        self.playwright_factory = playwright_factory or sync_playwright
        self.timeout_ms = settings.EXPORT_BROWSER_TIMEOUT_MS
        self.logo_timeout_ms = settings.EXPORT_LOGO_TIMEOUT_MS
        self.code_timeout_ms = settings.EXPORT_CODE_RENDER_TIMEOUT_MS
        self.scale = settings.EXPORT_BANNER_SCALE

    @staticmethod
    def build_url(palette: str, banner_color: str, logo_url: str = '', token: str = '') -> str:
        params = {'palette': palette, 'bannerColor': banner_color}
        if logo_url:
            params['logo'] = logo_url
        if token:
            params['token'] = token
        base = settings.EXPORT_RENDER_BASE_URL.rstrip('/')
        return f"{base}/export/banner/?{urlencode(params)}"

    def capture(
        self,
        palette: str,
        banner_color: str,
        logo_url: str = '',
        token: str = '',
    ) -> bytes:
        """
        Render the banner page and return the ``#banner`` element as PNG bytes.

        Raises:
            BannerCaptureError: On launch failure, navigation timeout, a
                selector that never appears, or an empty screenshot.
        """
        url = self.build_url(palette, banner_color, logo_url, token)
        logger.info("Capturing banner (palette=%s, banner_color=%s)", palette, banner_color)

        try:
            with self.playwright_factory() as playwright:
                browser = playwright.chromium.launch(headless=True)
                try:
                    return self._capture_page(browser, url, bool(logo_url))
                finally:
                    browser.close()
        except PlaywrightError as exc:
            logger.error("Banner capture failed: %s", exc)
            raise BannerCaptureError(str(exc)) from exc

    def _capture_page(self, browser, url: str, has_logo: bool) -> bytes:
        page = browser.new_page(viewport=VIEWPORT, device_scale_factor=self.scale)
        page.set_default_timeout(self.timeout_ms)

        page.goto(url, wait_until='domcontentloaded', timeout=self.timeout_ms)
        page.wait_for_selector(BANNER_SELECTOR, timeout=self.timeout_ms)
        page.evaluate("() => document.fonts.ready.then(() => true)")

        if has_logo:
            page.wait_for_selector(LOGO_SELECTOR, timeout=self.logo_timeout_ms)
            page.wait_for_function(LOGO_READY_JS, timeout=self.logo_timeout_ms)

        page.wait_for_selector(CODE_SELECTOR, state='attached', timeout=self.code_timeout_ms)
        page.wait_for_function(CODE_READY_JS, timeout=self.code_timeout_ms)
        page.add_style_tag(content=QUALITY_CSS)

        banner = page.query_selector(BANNER_SELECTOR)
        if banner is None:
            raise BannerCaptureError("Banner element not found")

        content = banner.screenshot(type='png', omit_background=False)
        if not content:
            raise BannerCaptureError("Banner screenshot was empty")
        logger.debug("Captured banner (%d bytes)", len(content))
        return content
