"""The htmltext type, htmlescape() and the TemplateIO collector used while
rendering a form.
"""

_ENTITIES = [('&', '&amp;'), ('<', '&lt;'), ('>', '&gt;'), ('"', '&quot;')]


def _quote(value):
    text = str(value)
    for char, entity in _ENTITIES: # '&' first
        text = text.replace(char, entity)
    return text


def _markup(value):
    # str of a piece of output, escaped unless it is htmltext already
    if isinstance(value, htmltext):
        return value.s
    return _quote(value)


def _raw(value):
    if isinstance(value, htmltext):
        return value.s
    return value


class htmltext:
    """Finished markup.  Strings added to or joined with an htmltext are
    escaped; other htmltext instances are taken as they are.
    """

    __slots__ = ['s']

    def __init__(self, s):
        self.s = str(s)

    def __str__(self):
        return self.s

    def __repr__(self):
        return 'htmltext(%r)' % self.s

    def __len__(self):
        return len(self.s)

    def __eq__(self, other):
        return self.s == _raw(other)

    def __hash__(self):
        return hash(self.s)

    def __contains__(self, item):
        return _raw(item) in self.s

    def count(self, item):
        return self.s.count(_raw(item))

    def __add__(self, other):
        if not isinstance(other, (str, htmltext)):
            return NotImplemented
        return htmltext(self.s + _markup(other))

    def __radd__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        return htmltext(_quote(other) + self.s)

    def join(self, items):
        return htmltext(self.s.join([_markup(item) for item in items]))


def htmlescape(value):
    """htmlescape(value : any) -> htmltext

    htmltext is returned unchanged; anything else is converted with str()
    and its &, <, > and " characters replaced by entities.
    """
    if isinstance(value, htmltext):
        return value
    return htmltext(_quote(value))


class TemplateIO:
    """Accumulates the output of one rendering pass:

        r = TemplateIO(html=True)
        r += htmltext('<p>')
        r += message        # escaped
        r += htmltext('</p>')
        return r.getvalue()

    None is skipped.  With html=True getvalue() escapes every piece that
    is not htmltext and returns htmltext; otherwise it returns a str.
    """

    __slots__ = ['html', 'parts']

    def __init__(self, html=False):
        self.html = html
        self.parts = []

    def __iadd__(self, part):
        if part is not None:
            self.parts.append(part)
        return self

    def __str__(self):
        return str(self.getvalue())

    def getvalue(self):
        if self.html:
            return htmltext(''.join([_markup(part) for part in self.parts]))
        return ''.join([str(part) for part in self.parts])
