#!/usr/bin/env python3
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

print(
    f"[mcp] browser={os.environ.get('SELENIUM_BROWSER', 'chrome')} | "
    f"headless={os.environ.get('SELENIUM_HEADLESS', 'false')} | "
    f"binary={os.environ.get('MCP_BROWSER_BINARY', 'auto')} | "
    f"timeout={os.environ.get('SELENIUM_TIMEOUT', '10')}s",
    file=sys.stderr,
)

from mcp_servers.selenium_browser.main import main  # noqa: E402

if __name__ == "__main__":
    main()
