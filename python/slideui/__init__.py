"""Terminal and GUI frontends for the sliding puzzle."""
