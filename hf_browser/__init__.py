"""
Top-level package for the heart-failure records browser.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    hf_browser.core
    hf_browser.views
    hf_browser.ui
"""

__all__: list[str] = []
