"""Data models for the CloudBrowse TUI."""
