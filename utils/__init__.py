"""Library CLI - Console utilities

This package contains helpers shared by the menu and the actions:
- Input validation and re-prompting (validators.py)
- Table rendering, output modes and screen handling (ui_helpers.py)
"""
