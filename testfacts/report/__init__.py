# testfacts/report/__init__.py
"""Message rendering helpers."""
