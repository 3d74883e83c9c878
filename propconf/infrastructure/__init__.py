"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the application to the outside world (file system, console,
tool settings, logging) and holds the properties parser and provider
that implement the domain interfaces.
"""
