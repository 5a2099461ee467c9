# 📄 File: app/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# A toolbox of small helpers every part of the Plant Identifier app can use.
#
# 🧪 Purpose (Technical Summary):
# Utilities package initialization re-exporting the structured logging helpers.
#
# 🔗 Dependencies:
# - logging.py
#
# 🔄 Connected Modules / Calls From:
# - app.main, all modules that log

from .logging import get_logger, log_context, setup_logging

__all__ = [
    'get_logger',
    'log_context',
    'setup_logging',
]
