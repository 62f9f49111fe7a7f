"""Business-management notification dispatch package."""
