"""
The APP layer wires the core geometry into a Qt application.
It owns the application state (Store), the input adapters and the widgets.
"""
