"""Slide deck pipeline — read markdown, group slides, render html5slides.

Follows a read -> sectionize -> generate -> write flow. The watch loop
re-runs the whole pipeline each time the source text changes; nothing
is rendered incrementally.

Every deck references:
    syntax.css  (Pygments stylesheet, created once next to the output)
    style.css   (provided by the author)
    slides.js   (the html5slides framework, loaded remotely)
"""

SYNTAX_CSS = "syntax.css"
STYLE_CSS = "style.css"
SLIDES_JS_URL = "http://html5slides.googlecode.com/svn/trunk/slides.js"
TEMPLATE_CLASS = "slides layout-regular template-pfi"
