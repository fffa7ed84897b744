"""External helper access - show/hide commands and pointer sampling."""
