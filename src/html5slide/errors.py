"""Exception types raised while reading and rendering decks."""


class Html5SlideError(Exception):
    """Base class for html5slide errors."""


class ReaderError(Html5SlideError):
    """The markdown source could not be turned into a document."""


class UnsupportedConstruct(Html5SlideError):
    """A document node has no html5slides rendering."""
