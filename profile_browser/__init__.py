"""
Top-level package for the phylogenetic profile browser.

Most code should import from submodules such as:
    profile_browser.core
    profile_browser.views
    profile_browser.ui
"""

__all__: list[str] = []
