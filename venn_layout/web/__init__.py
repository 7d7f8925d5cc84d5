"""Web API — serves computed layouts as JSON."""
