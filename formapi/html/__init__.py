"""HTML building blocks used by the form renderer.

htmltext and htmlescape
-----------------------

The htmltext type designates markup that does not need to be escaped.
htmlescape() calls str() on its argument, escapes the result and returns
an htmltext instance; it does nothing to htmltext instances.  Every
message text and attribute value that reaches the output goes through
htmlescape(), so localized strings containing "<" or "&" are safe to put
in a message table.

htmltag
-------

Builds a single start tag from keyword arguments:

    htmltag('input', xml_end=True, type='text', name='email', size=20)
    -> <input type="text" name="email" size="20" />

Attributes are emitted in argument order, css_class last.  None values
are dropped and ValuelessAttr produces a minimized boolean attribute
(checked="checked").
"""

from formapi.html._htmltext import htmltext, htmlescape, TemplateIO

ValuelessAttr = object()  # magic singleton object


def htmltag(tag, xml_end=False, css_class=None, **attrs):
    """Create a HTML tag."""
    r = ["<%s" % tag]
    if css_class is not None:
        attrs['class'] = css_class
    for (attr, val) in attrs.items():
        if val is ValuelessAttr:
            val = attr
        if val is not None:
            r.append(' %s="%s"' % (attr, htmlescape(val)))
    if xml_end:
        r.append(" />")
    else:
        r.append(">")
    return htmltext("".join(r))


def element(tag, content, css_class=None, **attrs):
    """Return start tag, escaped content and end tag as one htmltext."""
    return (htmltag(tag, css_class=css_class, **attrs)
            + htmlescape(content)
            + htmltext("</%s>" % tag))
