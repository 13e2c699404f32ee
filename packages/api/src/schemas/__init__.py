# This project was developed with assistance from AI tools.
"""Request and response schemas for checklists and tracking."""
