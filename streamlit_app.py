"""Streamlit Cloud entry point."""
from __future__ import annotations

from app import main

main()
