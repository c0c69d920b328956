"""formapi.errors

Exception classes used by formapi.  Setters, lookups and rendering never
raise these; they only come out of an explicit check such as Form.check().
"""
from formapi.html import htmltext, htmlescape


class FormError(Exception):
    """Base class of the formapi exceptions."""

    title = "Form error"

    def format(self):
        return htmlescape(self.title) + ": " + str(self)


class FormDefinitionError(FormError):
    """
    Raised by Form.check() when a form is not well formed: no target,
    duplicate or empty field names, missing translations.

    problems is the list of messages returned by Form.validate().
    """

    title = "Invalid form definition"

    def __init__(self, form_id, problems):
        FormError.__init__(self, form_id, problems)
        self.form_id = form_id
        self.problems = list(problems)

    def __str__(self):
        return "form %r: %s" % (self.form_id, "; ".join(self.problems))

    def format(self):
        msg = htmlescape(self.title) + ": " + str(self.form_id)
        items = htmltext('').join(
            [htmltext('<li>') + problem + htmltext('</li>')
             for problem in self.problems])
        return msg + htmltext('<ul>') + items + htmltext('</ul>')
