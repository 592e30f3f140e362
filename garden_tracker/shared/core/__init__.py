# 📄 File: garden_tracker/shared/core/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Core building blocks: the app's error types and the login check every
# request goes through.
#
# 🧪 Purpose (Technical Summary):
# Exception hierarchy and shared FastAPI dependencies.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - All modules
