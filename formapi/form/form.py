"""The Form class: identity, target, layout, an ordered list of fields
and a multilingual message table, rendered to an HTML table.
"""

from formapi.config import get_config
from formapi.errors import FormDefinitionError
from formapi.html import htmltext, htmltag, element, TemplateIO
from formapi.logger import get_logger


class Form:
    """
    Provides a high-level mechanism for describing a form and producing
    its HTML.  Example usage:

        form = Form('f1')
        form.set_target('submit.php')
        form.set_messages({10: {'en': 'Email', 'hu': 'E-mail'}})
        form.add_field(TextField(1, 'email', 10, length=20, maxlength=50))
        page = form.generate('en')

    The setters never raise: an invalid mode, layout or target is ignored
    and the previous value kept.  They return True if the value was taken.
    Use validate() or check() to find out whether a form is complete.

    Instance attributes:
      id : any
        unique id of the form, used as the id of the <form> element
      name : string | None
      mode : string
        "get" or "post"
      title : any
        message id of the title
      layout : int
        Form.HORIZONTAL or Form.VERTICAL
      target : string | None
        the URL that receives the submitted form
      fields : [Field]
        the fields in render order
      messages : { any : { string : string } }
        message id -> language code -> localized text
      config : Config | None
        supplies the defaults of generate(); None means get_config()
    """

    HORIZONTAL = 0
    VERTICAL = 1

    MODES = ("get", "post")

    def __init__(self, id, config=None):
        self.id = id
        self.config = config
        self.target = None
        self.name = None
        self.mode = "post"
        self.title = None
        self.layout = self.VERTICAL
        self.fields = []
        self.messages = {}

    def __repr__(self):
        return "<%s at %x: %s>" % (self.__class__.__name__, id(self), self.id)

    def __str__(self):
        # only meant for debugging
        attrs = ["%s:%s" % (attr, getattr(self, attr))
                 for attr in ('id', 'target', 'name', 'mode', 'title',
                              'layout')]
        lines = ["Form - " + " ".join(attrs)]
        for field in self.fields:
            lines.append("  " + str(field))
        return "\n".join(lines)

    def _get_config(self):
        if self.config is None:
            return get_config()
        return self.config

    def _reject(self, attr, value):
        if self._get_config().log_rejected:
            get_logger().log_rejected(repr(self), attr, value)
        return False

    def get_id(self):
        return self.id

    def set_name(self, name):
        self.name = name

    def get_name(self):
        return self.name

    def set_mode(self, mode):
        """(mode : string) -> bool

        Accept "get" or "post" in any case; the mode is stored in lower
        case.
        """
        if isinstance(mode, str) and mode.lower() in self.MODES:
            self.mode = mode.lower()
            return True
        return self._reject('mode', mode)

    def get_mode(self):
        return self.mode

    def set_title(self, title):
        self.title = title

    def get_title(self):
        return self.title

    def set_layout(self, layout):
        """(layout : Form.HORIZONTAL | Form.VERTICAL) -> bool"""
        if (isinstance(layout, int) and not isinstance(layout, bool)
                and layout in (self.HORIZONTAL, self.VERTICAL)):
            self.layout = layout
            return True
        return self._reject('layout', layout)

    def get_layout(self):
        return self.layout

    def set_target(self, target):
        """(target : string) -> bool

        Empty or blank targets are ignored.
        """
        if isinstance(target, str) and target.strip():
            self.target = target
            return True
        return self._reject('target', target)

    def get_target(self):
        return self.target

    def set_fields(self, fields):
        self.fields = list(fields)

    def get_fields(self):
        """Return a copy of the field list; use add_field() and
        remove_field() to change the fields of the form.
        """
        return list(self.fields)

    def add_field(self, field):
        self.fields.append(field)

    def remove_field(self, name):
        """Remove the first field called 'name' and return it, or None."""
        field = self.find(name)
        if field is not None:
            self.fields.remove(field)
        return field

    def set_messages(self, messages):
        self.messages = {id: dict(texts) for id, texts in messages.items()}

    def get_messages(self):
        """Return a copy of the message table; use set_message() to
        change it.
        """
        return {id: dict(texts) for id, texts in self.messages.items()}

    def set_message(self, id, lang, text):
        self.messages.setdefault(id, {})[lang] = text

    def get_msg(self, id, lang):
        """(id : any, lang : string) -> any

        Return the text of message 'id' in language 'lang'.  If there is
        no such translation the id itself is returned, so a missing
        message shows up as its id on the page.
        """
        try:
            return self.messages[id][lang]
        except (KeyError, TypeError):
            return id

    def has_msg(self, id, lang):
        try:
            return lang in self.messages[id]
        except (KeyError, TypeError):
            return False

    def find(self, name):
        """Return the first field called 'name' or None."""
        for field in self.fields:
            if field.get_name() == name:
                return field
        return None

    def validate(self, lang=None):
        """(lang : string | None) -> [string]

        Return the problems found in the form definition; an empty list
        means the form is complete.  If 'lang' is given, message ids
        without a translation in that language are reported too.
        """
        problems = []
        if self.target is None:
            problems.append("no target")
        seen = set()
        for field in self.fields:
            name = field.get_name()
            if not name:
                problems.append("field %r has no name" % field.get_id())
            elif name in seen:
                problems.append("duplicate field name %r" % name)
            else:
                seen.add(name)
        if lang is not None:
            ids = []
            if self.title is not None:
                ids.append(self.title)
            for field in self.fields:
                ids.extend(field.get_message_ids())
            missing = []
            for id in ids:
                if not self.has_msg(id, lang) and id not in missing:
                    missing.append(id)
            for id in missing:
                problems.append("message %r has no %r translation"
                                % (id, lang))
        return problems

    def check(self, lang=None):
        """Raise FormDefinitionError if validate() finds any problem."""
        problems = self.validate(lang)
        if problems:
            raise FormDefinitionError(self.id, problems)

    def generate(self, lang=None, full=None):
        """(lang : string | None, full : bool | None) -> htmltext

        Render the form.  If 'full' is true the form is wrapped in a
        complete HTML document titled with the form title.  Missing
        arguments come from the configuration (DEFAULT_LANGUAGE and
        FULL_PAGE).
        """
        config = self._get_config()
        if lang is None:
            lang = config.default_language
        if full is None:
            full = config.full_page
        if self.title is None:
            title = ''
        else:
            title = self.get_msg(self.title, lang)
        r = TemplateIO(html=True)
        if full:
            r += htmltext('<html><head>')
            r += element('title', title)
            r += htmltext('</head><body>')
        r += htmltag('form', id=self.id, css_class='formc',
                     action=self.target, method=self.mode,
                     enctype='multipart/form-data')
        r += element('p', title, css_class='titlec')
        r += htmltext('<table class="formtable">')
        if self.layout == self.HORIZONTAL:
            r += self._generate_horizontal(lang)
        else:
            r += self._generate_vertical(lang)
        r += htmltext('</table>')
        r += htmltext('</form>')
        if full:
            r += htmltext('</body></html>')
        return r.getvalue()

    def _generate_horizontal(self, lang):
        r = TemplateIO(html=True)
        r += htmltext('<tr>')
        for field in self.fields:
            r += htmltext('<td align="center">')
            r += field.generate_label(self, lang)
            r += htmltext('</td>')
        r += htmltext('</tr><tr>')
        for field in self.fields:
            r += htmltext('<td class="formfield" align="center">')
            r += field.generate(self, lang)
            r += htmltext('</td>')
        r += htmltext('</tr>')
        return r.getvalue()

    def _generate_vertical(self, lang):
        r = TemplateIO(html=True)
        for field in self.fields:
            r += htmltext('<tr><td>')
            r += field.generate_label(self, lang)
            r += htmltext('</td><td class="formfield">')
            r += field.generate(self, lang)
            r += htmltext('</td></tr>')
        return r.getvalue()
