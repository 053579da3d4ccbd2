"""
Utility modules for the Streamlit frontend.

This package contains:
- session: Per-session recipe finder services and async helpers
"""
