"""
Features Module - Self-contained feature units.

- documents: Word/PowerPoint upload staging, text extraction, editing and download
"""
