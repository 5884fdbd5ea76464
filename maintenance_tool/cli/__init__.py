# maintenance_tool/cli/__init__.py
"""Command-line interface for maintenance-tool"""
