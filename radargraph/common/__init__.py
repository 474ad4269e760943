"""Configuration and errors shared by the core and the GUI."""
