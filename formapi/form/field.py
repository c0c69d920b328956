"""Field classes.  A field knows how to render its label and its control;
the Form that owns it is passed in at render time so the field can look
up its localized messages.
"""

from formapi.config import get_config
from formapi.html import htmltext, htmltag, element, TemplateIO, ValuelessAttr


class Field:
    """The base class for all fields.

    Instance attributes:
      id : any
        unique id of the field within its form
      name : string
        name of the HTML form control (the key of the submitted value)
      label : any
        message id of the label
      requested : bool
        true if a value is required
      default : any
        initial value of the control
      help : any
        message id of the help text, None if the field has none
    """

    type = None

    def __init__(self, id, name, label=None, requested=False, default=None,
                 help=None):
        self.id = id
        self.name = name
        self.label = label
        self.requested = bool(requested)
        self.default = default
        self.help = help

    def __repr__(self):
        return "<%s at %x: %s>" % (self.__class__.__name__, id(self),
                                    self.name)

    def __str__(self):
        return "%s: %s" % (self.__class__.__name__, self.name)

    def get_id(self):
        return self.id

    def get_name(self):
        return self.name

    def get_type(self):
        return self.type

    def get_label(self):
        return self.label

    def get_help(self):
        return self.help

    def get_default(self):
        return self.default

    def is_requested(self):
        return self.requested

    def get_message_ids(self):
        """Return the message ids this field looks up when rendered."""
        ids = []
        if self.label is not None:
            ids.append(self.label)
        if self.help is not None:
            ids.append(self.help)
        return ids

    def _help_text(self, form, lang):
        if self.help is None:
            return None
        return form.get_msg(self.help, lang)

    def generate_label(self, form, lang):
        """(form : Form, lang : string) -> htmltext

        The localized label.  The help message, if any, becomes the
        title (tooltip) of the label.
        """
        if self.label is None:
            text = ''
        else:
            text = form.get_msg(self.label, lang)
        return element('span', text, css_class='labelc',
                       title=self._help_text(form, lang))

    def generate(self, form, lang):
        """(form : Form, lang : string) -> htmltext

        The markup of the control itself.
        """
        raise NotImplementedError


class TextField(Field):
    """A single line text input.

    Instance attributes:
      length : int
        visible width of the input (the size attribute)
      maxlength : int
        maximum number of characters accepted
    """

    type = "text"

    def __init__(self, id, name, label, length=None, maxlength=None,
                 help=None, requested=False, default=None):
        Field.__init__(self, id, name, label, requested, default, help)
        config = get_config()
        if length is None:
            length = config.text_length
        if maxlength is None:
            maxlength = config.text_maxlength
        self.length = length
        self.maxlength = maxlength

    def generate(self, form, lang):
        if self.default is None:
            value = ''
        else:
            value = self.default
        return (htmltext('<span class="textc">')
                + htmltag('input', xml_end=True, type='text',
                          maxlength=self.maxlength, size=self.length,
                          value=value, name=self.name)
                + htmltext('</span>'))


class OptionField(Field):
    """Base class of the fields offering a list of localized options.

    Instance attributes:
      options : [any]
        message ids of the options, in display order
      length : int
        number of items in one row, 0 puts all items in a single row
    """

    def __init__(self, id, name, label, options, length=None,
                 requested=False, default=None, help=None):
        Field.__init__(self, id, name, label, requested, default, help)
        if length is None:
            length = get_config().check_items_per_row
        self.options = list(options)
        self.length = length

    def get_options(self):
        return list(self.options)

    def get_option(self, i):
        """Return the message id of option 'i', or "?" when there is no
        such option.
        """
        if (not isinstance(i, int) or isinstance(i, bool)
                or not 0 <= i < len(self.options)):
            return "?"
        return self.options[i]

    def get_message_ids(self):
        return Field.get_message_ids(self) + self.options

    def is_default(self, i):
        return self.default is not None and str(self.default) == str(i)

    def generate_item(self, form, lang, i, title):
        raise NotImplementedError

    def generate(self, form, lang):
        title = self._help_text(form, lang)
        r = TemplateIO(html=True)
        r += htmltext('<div class="labelc"><table border="0"><tr>')
        for i in range(len(self.options)):
            if self.length > 0 and i > 0 and i % self.length == 0:
                r += htmltext('</tr><tr>')
            r += htmltext('<td>')
            r += self.generate_item(form, lang, i, title)
            r += form.get_msg(self.options[i], lang)
            r += htmltext('</td>')
        r += htmltext('</tr></table></div>')
        return r.getvalue()


class CheckField(OptionField):
    """A group of checkboxes submitted as an array: every box is named
    "name[]" and carries the index of its option as value.  All boxes
    share the help message of the field as title.
    """

    type = "check"

    def generate_item(self, form, lang, i, title):
        return htmltag('input', xml_end=True, type='checkbox',
                       name=self.name + '[]', value=i, title=title)


class RadioField(OptionField):
    """A group of radio buttons; the option whose index equals the
    default is checked.
    """

    type = "radio"

    def generate_item(self, form, lang, i, title):
        if self.is_default(i):
            checked = ValuelessAttr
        else:
            checked = None
        return htmltag('input', xml_end=True, type='radio', name=self.name,
                       value=i, title=title, checked=checked)


class SelectField(OptionField):
    """A drop-down list; the option whose index equals the default is
    selected.  'length' is not used.
    """

    type = "select"

    def generate(self, form, lang):
        r = TemplateIO(html=True)
        r += htmltag('select', name=self.name,
                     title=self._help_text(form, lang))
        for i, option in enumerate(self.options):
            if self.is_default(i):
                selected = ValuelessAttr
            else:
                selected = None
            r += element('option', form.get_msg(option, lang), value=i,
                         selected=selected)
        r += htmltext('</select>')
        return r.getvalue()


class HiddenField(Field):
    type = "hidden"

    def __init__(self, id, name, default=None):
        Field.__init__(self, id, name, default=default)

    def generate_label(self, form, lang):
        return htmltext('')

    def generate(self, form, lang):
        if self.default is None:
            value = ''
        else:
            value = self.default
        return htmltag('input', xml_end=True, type='hidden', name=self.name,
                       value=value)
