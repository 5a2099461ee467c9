# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder contains the Plant Identifier application code and
# records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
Plant Identifier API - AI-Powered Plant Identification

Identifies plants from photos with a multimodal model, repairs incomplete
model answers, and keeps a per-user list of favourite plants.
"""

__version__ = "1.0.0"
__title__ = "Plant Identifier API"
__description__ = "AI-Powered Plant Identification and Favourites"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
