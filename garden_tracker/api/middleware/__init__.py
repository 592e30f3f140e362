# 📄 File: garden_tracker/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that see every request on its way in and out.
# 🧪 Purpose (Technical Summary):
# HTTP middleware package (request logging and correlation ids).
# 🔗 Dependencies:
# Starlette
# 🔄 Connected Modules / Calls From:
# garden_tracker.main

from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware

__all__ = ["REQUEST_ID_HEADER", "RequestLoggingMiddleware"]
