"""
paleto_auth.api.__main__

Entrypoint for running the backend via `python -m paleto_auth.api`.
"""

from __future__ import annotations

import uvicorn

from paleto_auth.api.app import create_app
from paleto_auth.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.port,
        # Deployed behind a TLS-terminating proxy; Secure cookies need the forwarded scheme.
        proxy_headers=True,
        forwarded_allow_ips="*",
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
