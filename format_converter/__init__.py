"""Core logic for the JSON / CSV / XML File Converter.

The Gradio UI lives in `app.py`. This package contains plain functions that:
- parse JSON, CSV and XML text into a nested dict/list value
- serialize that value back out as any of the three formats
- run one conversion over an explicit per-session state
- read uploads and write downloads
"""
