"""Server-rendered pages wrapped in a shared shell with per-request context."""
