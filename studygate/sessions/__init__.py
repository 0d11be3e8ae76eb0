"""Learning-session record shaping and usage analytics."""
