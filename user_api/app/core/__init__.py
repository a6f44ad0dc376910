"""Cross‑cutting concerns: settings, logging and HTTP middleware."""
