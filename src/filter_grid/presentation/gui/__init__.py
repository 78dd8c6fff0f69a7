"""PyQt5 front end."""
