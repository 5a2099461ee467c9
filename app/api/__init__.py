# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package: the table of contents for the web-facing
# parts of the Plant Identifier.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (versioned routers and middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
Plant Identifier API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # Request logging and error handling
    │   ├── logging.py
    │   └── error_handling.py
    └── v1/                  # API version 1
        ├── __init__.py
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoints
"""

# API package metadata
__version__ = "1.0.0"
