"""
paleto_auth.api

API package.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: cookies, redirects and status codes here; login logic
# lives in `services.login_service`.
