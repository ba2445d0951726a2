"""HTML page and static assets."""
