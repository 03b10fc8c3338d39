"""Tests for viewport, element and stitched full-page screenshots."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from mcp_servers.selenium_browser.errors import BrowserToolError
from mcp_servers.selenium_browser.session import SessionManager
from mcp_servers.selenium_browser.tools import screenshot
from mcp_servers.selenium_browser.tools.screenshot import TileGrid, capture_full_page

from conftest import FakeDriver, FakeElement, tile_color


def _decode(data: str) -> Image.Image:
    return Image.open(BytesIO(base64.b64decode(data))).convert("RGB")


# ═══════════════════════════════════════════════════════════════════════════════
# TILE GRID
# ═══════════════════════════════════════════════════════════════════════════════


def test_tile_grid_uses_ceiling() -> None:
    grid = TileGrid.compute(page_width=1000, page_height=2500, viewport_width=1000, viewport_height=800)
    assert (grid.tiles_x, grid.tiles_y) == (1, 4)


def test_tile_grid_exact_fit() -> None:
    grid = TileGrid.compute(200, 300, 100, 100)
    assert (grid.tiles_x, grid.tiles_y) == (2, 3)


def test_tile_grid_origins_are_row_major() -> None:
    grid = TileGrid.compute(250, 150, 100, 100)
    assert grid.origins() == [(0, 0), (100, 0), (200, 0), (0, 100), (100, 100), (200, 100)]


@pytest.mark.parametrize("dims", [(0, 100, 100, 100), (100, 100, 0, 100), (100, -5, 100, 100)])
def test_tile_grid_rejects_non_positive_dimensions(dims: tuple[int, int, int, int]) -> None:
    with pytest.raises(ValueError):
        TileGrid.compute(*dims)


# ═══════════════════════════════════════════════════════════════════════════════
# FULL PAGE
# ═══════════════════════════════════════════════════════════════════════════════


def test_full_page_canvas_matches_page_and_clips_last_row(driver: FakeDriver) -> None:
    driver.page_size = (100, 250)
    driver.viewport = (100, 100)

    result = capture_full_page(driver, settle=0)

    assert result["type"] == "full_page_screenshot"
    assert result["format"] == "png"
    assert result["encoding"] == "base64"
    assert (result["width"], result["height"]) == (100, 250)
    image = _decode(result["data"])
    assert image.size == (100, 250)
    # each tile lands at its own scroll offset
    assert image.getpixel((5, 5)) == tile_color(0, 0)
    assert image.getpixel((5, 150)) == tile_color(0, 100)
    assert image.getpixel((5, 249)) == tile_color(0, 200)


def test_full_page_scrolls_row_major_and_restores_origin(driver: FakeDriver) -> None:
    driver.page_size = (150, 150)
    driver.viewport = (100, 100)

    capture_full_page(driver, settle=0)

    assert driver.scroll_log == [(0, 0), (100, 0), (0, 100), (100, 100), (0, 0)]
    assert driver.scroll == (0, 0)


def test_full_page_rescales_hidpi_tiles(driver: FakeDriver) -> None:
    driver.page_size = (200, 100)
    driver.viewport = (100, 100)
    driver.device_pixel_ratio = 2

    image = _decode(capture_full_page(driver, settle=0)["data"])

    assert image.size == (200, 100)
    assert image.getpixel((150, 50)) == tile_color(100, 0)


def test_full_page_restores_scroll_after_capture_failure(driver: FakeDriver, monkeypatch: pytest.MonkeyPatch) -> None:
    driver.page_size = (100, 300)
    driver.viewport = (100, 100)
    calls = {"n": 0}
    real_capture = driver.capture_screenshot

    def flaky(element=None):
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("tab crashed")
        return real_capture(element)

    monkeypatch.setattr(driver, "capture_screenshot", flaky)

    with pytest.raises(BrowserToolError) as exc:
        capture_full_page(driver, settle=0)

    assert "Failed to take full page screenshot" in exc.value.reason
    assert driver.scroll_log[-1] == (0, 0)


def test_full_page_rejects_empty_viewport(driver: FakeDriver) -> None:
    driver.viewport = (0, 0)
    with pytest.raises(BrowserToolError) as exc:
        capture_full_page(driver, settle=0)
    assert "invalid page metrics" in exc.value.reason


# ═══════════════════════════════════════════════════════════════════════════════
# VIEWPORT / ELEMENT
# ═══════════════════════════════════════════════════════════════════════════════


def test_take_screenshot_returns_image_map(active_session: SessionManager, driver: FakeDriver) -> None:
    driver.navigate("https://example.com")

    result = screenshot.take_screenshot(active_session)

    assert result["type"] == "screenshot"
    assert result["url"] == "https://example.com"
    assert result["title"] == "Example Domain"
    assert isinstance(result["timestamp"], int)
    assert _decode(result["data"]).size == driver.viewport


def test_take_screenshot_writes_png_to_output_path(active_session: SessionManager, tmp_path: Path) -> None:
    target = tmp_path / "shots" / "home"

    message = screenshot.take_screenshot(active_session, str(target))

    saved = tmp_path / "shots" / "home.png"
    assert saved.exists()
    assert message == f"Screenshot saved to: {saved.resolve()}"
    assert saved.read_bytes().startswith(b"\x89PNG")


def test_element_screenshot_scrolls_and_captures_element(active_session: SessionManager, driver: FakeDriver) -> None:
    driver.add(FakeElement(tag="h1", text="Example Domain"))

    result = screenshot.element_screenshot(active_session, "tag=h1")

    assert result["type"] == "element_screenshot"
    assert result["selector"] == "tag=h1"
    assert _decode(result["data"]).size == (8, 4)
    assert any("scrollIntoView" in s for s in driver.scripts)


def test_element_screenshot_missing_element_times_out(active_session: SessionManager) -> None:
    with pytest.raises(BrowserToolError) as exc:
        screenshot.element_screenshot(active_session, "id=nope")
    assert exc.value.reason.startswith("Element not found within")
