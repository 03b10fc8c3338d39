"""
Screenshot tools.

Provides:
- take_screenshot: viewport capture (optionally written to disk)
- element_screenshot: capture a single element
- capture_full_page: tile the page viewport by viewport and stitch with Pillow
"""

from __future__ import annotations

import base64
import math
import time
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING, Any

from PIL import Image

from ..errors import BrowserToolError, ElementTimeoutError
from ..formatting import ImagePayload
from ..locators import Selector, resolve
from .base import logger, scroll_into_view, wait_for_element

if TYPE_CHECKING:
    from ..driver import BrowserDriver
    from ..session import SessionManager

PAGE_METRICS_JS = (
    "return [document.body.scrollWidth, document.body.scrollHeight, window.innerWidth, window.innerHeight];"
)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@dataclass(frozen=True)
class TileGrid:
    """Viewport-sized tiles covering the whole page, row-major."""

    tiles_x: int
    tiles_y: int
    viewport_width: int
    viewport_height: int
    page_width: int
    page_height: int

    @classmethod
    def compute(cls, page_width: int, page_height: int, viewport_width: int, viewport_height: int) -> TileGrid:
        if min(page_width, page_height, viewport_width, viewport_height) <= 0:
            raise ValueError(
                f"invalid page metrics: page={page_width}x{page_height} viewport={viewport_width}x{viewport_height}"
            )
        return cls(
            tiles_x=math.ceil(page_width / viewport_width),
            tiles_y=math.ceil(page_height / viewport_height),
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            page_width=page_width,
            page_height=page_height,
        )

    def origins(self) -> list[tuple[int, int]]:
        return [
            (x * self.viewport_width, y * self.viewport_height)
            for y in range(self.tiles_y)
            for x in range(self.tiles_x)
        ]


def _page_metrics(driver: BrowserDriver) -> tuple[int, int, int, int]:
    raw = driver.execute_script(PAGE_METRICS_JS)
    if not isinstance(raw, (list, tuple)) or len(raw) != 4:
        raise ValueError(f"unexpected page metrics: {raw!r}")
    page_w, page_h, view_w, view_h = (int(v or 0) for v in raw)
    return page_w, page_h, view_w, view_h


def compose_tiles(driver: BrowserDriver, grid: TileGrid, settle: float) -> bytes:
    """Scroll through the grid, capture each viewport and paste it onto one canvas."""
    canvas = Image.new("RGB", (grid.page_width, grid.page_height), "white")
    try:
        for left, top in grid.origins():
            driver.scroll_to(left, top)
            if settle:
                time.sleep(settle)
            with Image.open(BytesIO(driver.capture_screenshot())) as shot:
                tile = shot.convert("RGB")
            if tile.size != (grid.viewport_width, grid.viewport_height):
                # HiDPI captures come back scaled by devicePixelRatio.
                tile = tile.resize((grid.viewport_width, grid.viewport_height))
            canvas.paste(tile, (left, top))
    finally:
        try:
            driver.scroll_to(0, 0)
        except Exception as exc:  # noqa: BLE001
            logger.warning("failed to restore scroll position: %s", exc)
    out = BytesIO()
    canvas.save(out, format="PNG")
    return out.getvalue()


def capture_full_page(driver: BrowserDriver, settle: float = 0.2) -> dict[str, Any]:
    """Stitch a screenshot of the entire scrollable page."""
    try:
        page_w, page_h, view_w, view_h = _page_metrics(driver)
        grid = TileGrid.compute(page_w, page_h, view_w, view_h)
        png = compose_tiles(driver, grid, settle)
    except Exception as e:
        raise BrowserToolError(
            tool="fullPageScreenshot",
            action="capture",
            reason=f"Failed to take full page screenshot: {e}",
            suggestion="Ensure a page with a non-empty viewport is loaded",
        ) from e
    logger.info("full_page_screenshot tiles=%dx%d size=%dx%d", grid.tiles_x, grid.tiles_y, page_w, page_h)
    return ImagePayload(
        type="full_page_screenshot",
        format="png",
        encoding="base64",
        data=_b64(png),
        width=page_w,
        height=page_h,
        timestamp=_now_ms(),
    )


def full_page_screenshot(session: SessionManager) -> dict[str, Any]:
    return capture_full_page(session.driver, session.config.tile_settle)


def take_screenshot(session: SessionManager, output_path: str | None = None) -> dict[str, Any] | str:
    """Viewport screenshot as an image map, or saved to output_path."""
    driver = session.driver
    try:
        png = driver.capture_screenshot()
        if output_path:
            path = Path(output_path).expanduser()
            if path.suffix.lower() != ".png":
                path = path.with_name(path.name + ".png")
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(png)
            return f"Screenshot saved to: {path.resolve()}"
        return ImagePayload(
            type="screenshot",
            format="png",
            encoding="base64",
            data=_b64(png),
            timestamp=_now_ms(),
            url=driver.current_url(),
            title=driver.title(),
        )
    except Exception as e:
        raise BrowserToolError(
            tool="screenshot",
            action="capture",
            reason=f"Failed to take screenshot: {e}",
            suggestion="Check that the output path is writable" if output_path else "",
        ) from e


def element_screenshot(session: SessionManager, selector: str | Selector) -> dict[str, Any]:
    sel = selector if isinstance(selector, Selector) else resolve(selector)
    driver = session.driver
    try:
        element = wait_for_element(driver, sel, tool="elementScreenshot", timeout=session.config.timeout)
        scroll_into_view(driver, element, session.config.scroll_settle)
        png = driver.capture_screenshot(element)
    except ElementTimeoutError:
        raise
    except Exception as e:
        raise BrowserToolError(
            tool="elementScreenshot",
            action="capture",
            reason=f"Failed to take element screenshot: {e}",
            details={"selector": str(sel)},
        ) from e
    return ImagePayload(
        type="element_screenshot",
        selector=str(sel),
        format="png",
        encoding="base64",
        data=_b64(png),
        timestamp=_now_ms(),
    )


__all__ = [
    "PAGE_METRICS_JS",
    "TileGrid",
    "capture_full_page",
    "compose_tiles",
    "element_screenshot",
    "full_page_screenshot",
    "take_screenshot",
]
