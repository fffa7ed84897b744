"""AT-SPI access - registry subscriptions and main loop control (pyatspi)."""
