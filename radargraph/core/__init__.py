"""Kivy-independent radar chart core: geometry, layout, drawing and animation."""
