# assets/__init__.py
"""
Templates and static files shipped alongside the application code
"""

from pathlib import Path

ASSETS_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = ASSETS_DIR / 'templates'
STATIC_DIR = ASSETS_DIR / 'static'
