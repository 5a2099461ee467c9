# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as the toolbox every part of the Plant Identifier uses:
# settings, error types, logging and the connection to outside services.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, exceptions, logging utilities and the
# external API client used throughout the application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (settings, Redis)
- Exception hierarchy and common dependencies
- External API client
- Logging utilities
"""

__all__ = []
