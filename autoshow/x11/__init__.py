"""X11 helpers - display connection and helper window lookup (python-xlib)."""
