"""Owner-scoped operations behind the dashboard pages."""
