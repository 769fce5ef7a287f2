"""
End-to-end SDK example: build a short slideshow and queue it for rendering.

Run from the repository root:
    PICOVICO_USER=... PICOVICO_PASSWORD=... .venv/bin/python example.py
"""
import logging
import os
import time

import picovico
from picovico import Picovico, PicovicoError, Quality

# ── logging ──────────────────────────────────────────────────────────────────
# The SDK emits logs under the "picovico" logger.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    datefmt="%H:%M:%S",
)
# Uncomment to see every HTTP request/response:
# logging.getLogger("picovico").setLevel(logging.DEBUG)

print(f"\npicovico SDK v{picovico.__version__}")
print("=" * 60)

with Picovico() as client:
    # ── step 1 · login ───────────────────────────────────────────────────────
    print("\n[1/5] Logging in…")
    try:
        client.login(os.environ["PICOVICO_USER"], os.environ["PICOVICO_PASSWORD"])
    except PicovicoError as e:
        print(f"      ✗ Login failed: {e}")
        raise SystemExit(1)
    print("      → logged in")

    # ── step 2 · begin ───────────────────────────────────────────────────────
    video = client.session
    name = f"sdk-test-{int(time.time())}"
    print(f"\n[2/5] Beginning project {name!r}")
    if video.begin(name, quality=Quality.Q_480P) is None:
        print("      ✗ No project id returned")
        raise SystemExit(1)
    print(f"      → video_id = {video.video_id!r}")

    # ── step 3 · slides ──────────────────────────────────────────────────────
    print("\n[3/5] Adding slides…")
    video.add_text("Hello", "A Picovico SDK demo")
    video.add_image("https://picsum.photos/id/10/1280/720", caption="Forest")
    video.add_image("https://picsum.photos/id/28/1280/720", caption="Lake")
    video.add_credits("Photos", "picsum.photos")
    print(f"      → {len(video.document.assets)} slides")

    # ── step 4 · style ───────────────────────────────────────────────────────
    styles = client.get_styles() or []
    print(f"\n[4/5] {len(styles)} styles available")
    if styles:
        video.set_style(styles[0].get("machine_name"))
        print(f"      → using {video.document.style!r}")

    # ── step 5 · render ──────────────────────────────────────────────────────
    print("\n[5/5] Saving and queueing render…")
    result = video.create()
    print(f"      → {result}")

print("\n" + "=" * 60)
print("Done. Check the status later with:")
print(f"  client.get_video({video.video_id!r})['status']")
print()
