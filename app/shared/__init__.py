# Shared constants and utilities
