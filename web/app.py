"""
Secret Shares Web API.

JSON endpoints backed by the secret_shares library. Nothing is stored:
secrets come in, share strings go out, and the reverse.

Author: secret-shares contributors
Date: 2026-10-17
"""

import argparse
import base64
import logging
import sys
from pathlib import Path

from aiohttp import web

# Ensure secret_shares is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import secret_shares

logger = logging.getLogger('secret_shares.web')

# Larger splits belong on the command line
MAX_SHARES = 1024


# ---------------------------------------------------------------------------
# API handlers
# ---------------------------------------------------------------------------

async def api_split(request: web.Request) -> web.Response:
    """
    POST /api/split
    Body JSON: { secret: str, n: int, k: int, secret_b64?: str }

    If secret_b64 is provided, it's decoded as raw bytes.
    Otherwise secret is treated as UTF-8 text (may be empty).

    Returns: { shares, n, k, secret_size }
    """
    data = await _read_json(request)
    if data is None:
        return _err("Invalid JSON body", 400)

    n = data.get("n")
    k = data.get("k")
    if n is None or k is None:
        return _err("Missing n or k", 400)

    try:
        n, k = int(n), int(k)
    except (ValueError, TypeError):
        return _err("n and k must be integers", 400)
    if n > MAX_SHARES:
        return _err(f"n must be <= {MAX_SHARES}", 400)

    secret_b64 = data.get("secret_b64")
    if secret_b64 is not None:
        try:
            secret = base64.b64decode(secret_b64, validate=True)
        except ValueError:
            return _err("Invalid base64 secret", 400)
    else:
        text = data.get("secret")
        if text is None:
            text = ""
        if not isinstance(text, str):
            return _err("secret must be a string", 400)
        secret = text.encode("utf-8")

    try:
        shares = secret_shares.split(secret, n, k)
    except ValueError as exc:
        return _err(f"Split failed: {exc}", 400)

    logger.info("split %d bytes into %d shares (%d-of-%d)", len(secret), n, k, n)
    return web.json_response({
        "ok": True,
        "n": n,
        "k": k,
        "secret_size": len(secret),
        "shares": shares,
    })


async def api_recover(request: web.Request) -> web.Response:
    """
    POST /api/recover
    Body JSON: { shares: [str, ...] }

    Returns: { secret: str|null, secret_b64: str, secret_size: int }
    """
    data = await _read_json(request)
    if data is None:
        return _err("Invalid JSON body", 400)

    shares = data.get("shares", [])
    if not isinstance(shares, list) or not all(isinstance(s, str) for s in shares):
        return _err("shares must be a list of strings", 400)

    try:
        secret = secret_shares.recover(shares)
    except ValueError as exc:
        return _err(f"Recovery failed: {exc}", 400)

    # Try to decode as UTF-8 text; base64 is always present
    try:
        secret_text = secret.decode("utf-8")
    except UnicodeDecodeError:
        secret_text = None

    return web.json_response({
        "ok": True,
        "secret": secret_text,
        "secret_b64": base64.b64encode(secret).decode("ascii"),
        "secret_size": len(secret),
    })


async def api_verify(request: web.Request) -> web.Response:
    """
    POST /api/verify
    Body JSON: { shares: [str, ...] }

    Returns verification result dict.
    """
    data = await _read_json(request)
    if data is None:
        return _err("Invalid JSON body", 400)

    shares = data.get("shares", [])
    if not shares:
        return _err("No shares provided", 400)
    if not isinstance(shares, list) or not all(isinstance(s, str) for s in shares):
        return _err("shares must be a list of strings", 400)

    result = secret_shares.verify_shares(shares)
    result["ok"] = True
    return web.json_response(result)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _read_json(request: web.Request):
    """Request body as a dict, or None if it is not a JSON object."""
    try:
        data = await request.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _err(msg: str, status: int = 400) -> web.Response:
    return web.json_response({"ok": False, "error": msg}, status=status)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> web.Application:
    app = web.Application(client_max_size=1024 * 1024)  # 1 MB bodies

    app.router.add_post("/api/split", api_split)
    app.router.add_post("/api/recover", api_recover)
    app.router.add_post("/api/verify", api_verify)

    return app


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Secret Shares Web API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8787)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    web.run_app(create_app(), host=args.host, port=args.port)
