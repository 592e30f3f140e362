# 📄 File: garden_tracker/modules/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The feature areas of the Garden Tracker: the user's own plants and the
# external plant catalog.
#
# 🧪 Purpose (Technical Summary):
# Bounded-context packages, each split into domain, application,
# infrastructure and presentation layers.
#
# 🔗 Dependencies:
# - garden_tracker.shared
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.api.v1.router
