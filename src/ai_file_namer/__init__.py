"""
AI File Namer package.

Provides:
- Description validation for the filename form
- A Gemini-backed suggestion endpoint served via FastAPI
- A one-shot CLI for generating names from a terminal
"""
