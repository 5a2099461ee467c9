"""
Infrastructure layer package for the Plant Identifier API.
Provides the external API client shared by feature modules.
"""
