"""html5slide — live markdown to html5slides deck renderer."""

__version__ = "0.1.0"
