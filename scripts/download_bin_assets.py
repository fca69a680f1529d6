import argparse
import logging
import os
import sys
import time
from urllib.parse import urlparse

import httpx

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from smartbin.core.logging import setup_logging

logger = logging.getLogger("download_bin_assets")

DELAY_SECONDS = 1.0

def fetch_asset_list(client: httpx.Client, base_url: str, bin_id: str) -> list[dict]:
    res = client.get(f"{base_url}/assets/by-bin/{bin_id}")
    res.raise_for_status()
    data = res.json()
    if not data.get("success"):
        raise RuntimeError(data.get("error") or "listing failed")
    return data["assets"]

def _filename(bin_id: str, index: int, url: str) -> str:
    ext = os.path.splitext(urlparse(url).path)[1] or ".mp4"
    return f"bin-{bin_id}-video-{index}{ext}"

def download_all(client: httpx.Client, assets: list[dict], bin_id: str, out_dir: str, delay: float = DELAY_SECONDS) -> int:
    """
    Download each asset in turn, pausing `delay` seconds after every success.
    A failed download is logged and skipped. Returns the number saved.
    """
    os.makedirs(out_dir, exist_ok=True)
    saved = 0
    for index, asset in enumerate(assets, start=1):
        url = asset.get("downloadUrl") or asset["url"]
        path = os.path.join(out_dir, _filename(bin_id, index, asset["url"]))
        try:
            with client.stream("GET", url) as res:
                res.raise_for_status()
                with open(path, "wb") as f:
                    for chunk in res.iter_bytes():
                        f.write(chunk)
        except (httpx.HTTPError, OSError) as e:
            logger.error(f"Error downloading video {index}: {e}")
            continue
        saved += 1
        logger.info(f"Downloaded {saved}/{len(assets)} -> {path}")
        time.sleep(delay)
    return saved

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Download every video attached to a bin.")
    parser.add_argument("bin_id")
    parser.add_argument("--api", default=os.environ.get("SMARTBIN_API", "http://localhost:8000/api"))
    parser.add_argument("--out", default="downloads")
    parser.add_argument("--delay", type=float, default=DELAY_SECONDS)
    args = parser.parse_args(argv)

    setup_logging()
    with httpx.Client(timeout=60.0, follow_redirects=True) as client:
        try:
            assets = fetch_asset_list(client, args.api.rstrip("/"), args.bin_id)
        except (httpx.HTTPError, RuntimeError) as e:
            logger.error(f"Error fetching video list: {e}")
            return 1
        if not assets:
            logger.info("No videos found for this bin.")
            return 0
        logger.info(f"Found {len(assets)} videos. Downloading...")
        download_all(client, assets, args.bin_id, args.out, delay=args.delay)
    logger.info("All downloads processed.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
