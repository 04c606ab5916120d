"""
paleto_auth.sheets

Google Sheets employee registry (read-only).
"""

# Package marker.
