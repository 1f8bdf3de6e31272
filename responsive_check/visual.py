"""Headless-browser screenshots and layout checks across viewport sizes."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

MIN_TOUCH_TARGET = 44
DEFAULT_SETTLE_MS = 1500
DEFAULT_TIMEOUT_MS = 30000

CUT_OFF_SELECTORS = ".form-section, .benefit-card, .text-block, .partnership-container, .submit-btn"
CLICKABLE_SELECTORS = "button, a, input, select, [onclick]"

HORIZONTAL_SCROLL_JS = """() =>
    document.documentElement.scrollWidth > document.documentElement.clientWidth
"""

CUT_OFF_JS = """(selectors) => {
    const names = [];
    document.querySelectorAll(selectors).forEach((el) => {
        if (el.getBoundingClientRect().right > window.innerWidth) {
            names.push(typeof el.className === 'string' ? el.className : el.tagName);
        }
    });
    return names;
}"""

TOUCH_TARGETS_JS = """(selectors) => {
    const targets = [];
    document.querySelectorAll(selectors).forEach((el) => {
        const rect = el.getBoundingClientRect();
        const className = typeof el.className === 'string' ? el.className : '';
        targets.push({
            tag: el.tagName,
            identifier: el.id || className || el.tagName,
            width: rect.width,
            height: rect.height,
        });
    });
    return targets;
}"""

INSTALL_HINT = "Run: pip install playwright && playwright install chromium"


class BrowserUnavailableError(RuntimeError):
    """Raised when the headless browser runtime is not installed."""


@dataclass(frozen=True, slots=True)
class Viewport:
    name: str
    width: int
    height: int
    scale_factor: float = 1.0


@dataclass(frozen=True, slots=True)
class PageTarget:
    name: str
    url: str
    extra_delay_ms: int = 0


@dataclass(frozen=True, slots=True)
class TouchTarget:
    """Bounding box of one clickable element."""

    tag: str
    identifier: str
    width: float
    height: float

    def describe(self) -> str:
        return f"{self.tag}({self.width:.0f}x{self.height:.0f})"


@dataclass(slots=True)
class CaptureResult:
    """Outcome of one page rendered at one viewport."""

    page: str
    viewport: Viewport
    captured: bool = False
    horizontal_scroll: bool = False
    findings: list[str] = field(default_factory=list)
    screenshots: list[Path] = field(default_factory=list)
    error: str | None = None


@dataclass(slots=True)
class VisualRun:
    """Summary of a whole screenshot run."""

    screenshots_dir: Path
    results: list[CaptureResult] = field(default_factory=list)
    stale_removed: int = 0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def captured(self) -> int:
        return sum(1 for result in self.results if result.captured)

    @property
    def issues(self) -> list[str]:
        return [finding for result in self.results for finding in result.findings]

    @property
    def exit_code(self) -> int:
        return 1 if self.issues else 0


DEFAULT_VIEWPORTS: tuple[Viewport, ...] = (
    Viewport("iPhone-SE", 375, 667, 2),
    Viewport("iPhone-12", 390, 844, 3),
    Viewport("iPhone-14-Pro-Max", 430, 932, 3),
    Viewport("Pixel-7", 412, 915, 2.625),
    Viewport("iPad-Mini", 768, 1024, 2),
    Viewport("iPad-Pro", 1024, 1366, 2),
    Viewport("Desktop-HD", 1280, 800, 1),
    Viewport("Desktop-FHD", 1920, 1080, 1),
    Viewport("Desktop-2K", 2560, 1440, 1),
)

# confirmacao.html shows a loading screen before its content.
DEFAULT_PAGES: tuple[PageTarget, ...] = (
    PageTarget("index", "index.html"),
    PageTarget("confirmacao", "confirmacao.html", extra_delay_ms=2500),
)


def find_small_touch_targets(
    targets: Sequence[TouchTarget],
    minimum: int = MIN_TOUCH_TARGET,
) -> list[TouchTarget]:
    """Return rendered targets narrower or shorter than ``minimum`` pixels.

    Hidden elements (zero width or height) are ignored, and checkboxes are
    exempt because their label is the clickable area.
    """
    small: list[TouchTarget] = []
    for target in targets:
        if target.width <= 0 or target.height <= 0:
            continue
        if target.width >= minimum and target.height >= minimum:
            continue
        if "checkbox" in target.identifier:
            continue
        small.append(target)
    return small


def screenshot_paths(out_dir: Path, page: str, viewport: Viewport) -> tuple[Path, Path]:
    stem = f"{page}-{viewport.name}"
    return (out_dir / f"{stem}.png", out_dir / f"{stem}-full.png")


def prepare_screenshots_dir(out_dir: Path) -> int:
    """Create ``out_dir`` or empty it; return how many stale files were removed."""
    if not out_dir.exists():
        out_dir.mkdir(parents=True)
        return 0

    removed = 0
    for item in out_dir.iterdir():
        if item.is_file():
            item.unlink()
            removed += 1
    return removed


def resolve_page_url(root: Path, url: str) -> str:
    if "://" in url:
        return url
    return (root / url).resolve().as_uri()


def load_playwright() -> tuple[Callable[[], Any], type[Exception]]:
    """Import Playwright lazily so the analyzer works without it."""
    try:
        from playwright.async_api import Error, async_playwright
    except ImportError as exc:
        raise BrowserUnavailableError(f"Playwright is not installed. {INSTALL_HINT}") from exc
    return async_playwright, Error


def run_visual_checks(
    root: Path,
    out_dir: Path,
    *,
    pages: Sequence[PageTarget] = DEFAULT_PAGES,
    viewports: Sequence[Viewport] = DEFAULT_VIEWPORTS,
    settle_ms: int = DEFAULT_SETTLE_MS,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    on_result: Callable[[CaptureResult], None] | None = None,
) -> VisualRun:
    """Capture every page at every viewport; blocking wrapper over the async run."""
    return asyncio.run(
        capture_all(
            root,
            out_dir,
            pages=pages,
            viewports=viewports,
            settle_ms=settle_ms,
            timeout_ms=timeout_ms,
            on_result=on_result,
        )
    )


async def capture_all(
    root: Path,
    out_dir: Path,
    *,
    pages: Sequence[PageTarget],
    viewports: Sequence[Viewport],
    settle_ms: int,
    timeout_ms: int,
    on_result: Callable[[CaptureResult], None] | None = None,
) -> VisualRun:
    async_playwright, error_cls = load_playwright()
    run = VisualRun(screenshots_dir=out_dir)

    async with async_playwright() as playwright:
        try:
            browser = await playwright.chromium.launch(
                headless=True,
                args=["--no-sandbox", "--disable-setuid-sandbox"],
            )
        except error_cls as exc:
            raise BrowserUnavailableError(
                f"Chromium could not be launched: {exc}. {INSTALL_HINT}"
            ) from exc

        run.stale_removed = prepare_screenshots_dir(out_dir)
        try:
            for page_target in pages:
                for viewport in viewports:
                    result = await capture_page(
                        browser,
                        page_target,
                        viewport,
                        url=resolve_page_url(root, page_target.url),
                        out_dir=out_dir,
                        settle_ms=settle_ms,
                        timeout_ms=timeout_ms,
                        error_cls=error_cls,
                    )
                    run.results.append(result)
                    if on_result is not None:
                        on_result(result)
        finally:
            await browser.close()

    return run


async def capture_page(
    browser: Any,
    page_target: PageTarget,
    viewport: Viewport,
    *,
    url: str,
    out_dir: Path,
    settle_ms: int,
    timeout_ms: int,
    error_cls: type[Exception],
) -> CaptureResult:
    """Render one page at one viewport, record layout findings, save screenshots."""
    result = CaptureResult(page=page_target.name, viewport=viewport)
    prefix = f"{page_target.name} @ {viewport.name}"
    context = await browser.new_context(
        viewport={"width": viewport.width, "height": viewport.height},
        device_scale_factor=viewport.scale_factor,
    )
    try:
        page = await context.new_page()
        await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        if page_target.extra_delay_ms:
            await page.wait_for_timeout(page_target.extra_delay_ms)
        await page.wait_for_timeout(settle_ms)

        result.horizontal_scroll = bool(await page.evaluate(HORIZONTAL_SCROLL_JS))
        if result.horizontal_scroll:
            result.findings.append(f"{prefix}: Horizontal scroll detected")

        cut_off = await page.evaluate(CUT_OFF_JS, CUT_OFF_SELECTORS)
        if cut_off:
            result.findings.append(f"{prefix}: Elements cut off: {', '.join(cut_off)}")

        raw_targets = await page.evaluate(TOUCH_TARGETS_JS, CLICKABLE_SELECTORS)
        small = find_small_touch_targets([TouchTarget(**item) for item in raw_targets])
        if small:
            described = ", ".join(target.describe() for target in small)
            result.findings.append(f"{prefix}: Small touch targets: {described}")

        viewport_path, full_path = screenshot_paths(out_dir, page_target.name, viewport)
        await page.screenshot(path=str(viewport_path), full_page=False)
        await page.screenshot(path=str(full_path), full_page=True)
        result.screenshots.extend([viewport_path, full_path])
        result.captured = True
    except error_cls as exc:
        result.error = str(exc)
        result.findings.append(f"{prefix}: {exc}")
    finally:
        await context.close()
    return result
