import io

from formapi.config import Config, set_config
from formapi.errors import FormDefinitionError
from formapi.form import Form, TextField, CheckField
from formapi.html import htmltext
from formapi.logger import DefaultLogger, set_logger
from formapi.test.utest import UTest


class LabelledField(TextField):
    # renders its name as control so the cell order is easy to check
    def generate(self, form, lang):
        return htmltext('[') + self.name + htmltext(']')


def make_form(layout=Form.VERTICAL):
    form = Form('f1')
    form.set_target('submit.php')
    form.set_layout(layout)
    form.set_messages({1: {'en': 'A'}, 2: {'en': 'B'}, 3: {'en': 'C'}})
    form.set_fields([LabelledField(1, 'a', 1), LabelledField(2, 'b', 2),
                     LabelledField(3, 'c', 3)])
    return form


class FormSetterTest(UTest):
    def _pre(self):
        set_config(Config(log_rejected=True))
        self.logger = DefaultLogger()
        self.logger.error_log = io.StringIO()
        set_logger(self.logger)

    def _post(self):
        set_config(None)
        set_logger(None)

    def check_defaults(self):
        form = Form('f1')
        assert form.get_id() == 'f1'
        assert form.get_mode() == 'post'
        assert form.get_layout() == Form.VERTICAL
        assert form.get_target() is None
        assert form.get_name() is None
        assert form.get_title() is None
        assert form.get_fields() == []
        assert form.get_messages() == {}

    def check_mode(self):
        form = Form('f1')
        for mode in ('get', 'GET', 'Post', 'post'):
            assert form.set_mode(mode)
            assert form.get_mode() == mode.lower()
        form.set_mode('get')
        for mode in ('put', '', 'gett', None, 1):
            assert not form.set_mode(mode)
            assert form.get_mode() == 'get'

    def check_layout(self):
        form = Form('f1')
        assert form.set_layout(Form.HORIZONTAL)
        assert form.get_layout() == Form.HORIZONTAL
        for layout in (2, -1, 'vertical', '1', None, True, 1.0):
            assert not form.set_layout(layout)
            assert form.get_layout() == Form.HORIZONTAL
        assert form.set_layout(Form.VERTICAL)
        assert form.get_layout() == Form.VERTICAL

    def check_target(self):
        form = Form('f1')
        assert form.set_target('submit.php')
        for target in ('', '   ', None):
            assert not form.set_target(target)
            assert form.get_target() == 'submit.php'

    def check_rejected_logged(self):
        form = Form('f1')
        form.set_mode('delete')
        out = self.logger.error_log.getvalue()
        assert "ignored invalid mode 'delete'" in out
        set_config(Config(log_rejected=False))
        form.set_target('')
        assert 'target' not in self.logger.error_log.getvalue()

    def check_rejected_follows_global_config(self):
        set_config(Config())
        form = Form('f1')
        form.set_mode('put')
        assert self.logger.error_log.getvalue() == ''
        set_config(Config(log_rejected=True))
        form.set_mode('put')
        out = self.logger.error_log.getvalue()
        assert "ignored invalid mode 'put'" in out

    def check_rejected_follows_form_config(self):
        set_config(Config())
        form = Form('f1', config=Config(log_rejected=True))
        assert not form.set_layout(7)
        assert 'ignored invalid layout 7' in self.logger.error_log.getvalue()
        set_config(Config(log_rejected=True))
        quiet = Form('f2', config=Config())
        quiet.set_target(' ')
        assert 'target' not in self.logger.error_log.getvalue()

    def check_name_title(self):
        form = Form('f1')
        form.set_name('reg')
        form.set_title(5)
        assert form.get_name() == 'reg'
        assert form.get_title() == 5


class FormContentTest(UTest):
    def check_fields_copied(self):
        form = make_form()
        fields = form.get_fields()
        fields.pop()
        assert len(form.get_fields()) == 3
        source = [TextField(1, 'x', 1)]
        form.set_fields(source)
        source.append(TextField(2, 'y', 2))
        assert [f.get_name() for f in form.get_fields()] == ['x']

    def check_add_remove(self):
        form = make_form()
        form.add_field(TextField(4, 'd', 4))
        assert [f.get_name() for f in form.get_fields()] == \
            ['a', 'b', 'c', 'd']
        removed = form.remove_field('b')
        assert removed.get_name() == 'b'
        assert form.remove_field('b') is None
        assert [f.get_name() for f in form.get_fields()] == ['a', 'c', 'd']

    def check_messages_copied(self):
        form = Form('f1')
        messages = {10: {'en': 'Email'}}
        form.set_messages(messages)
        messages[10]['en'] = 'changed'
        assert form.get_msg(10, 'en') == 'Email'
        copy = form.get_messages()
        copy[10]['hu'] = 'E-mail'
        assert form.get_msg(10, 'hu') == 10
        form.set_message(10, 'hu', 'E-mail')
        form.set_message(11, 'en', 'Name')
        assert form.get_msg(10, 'hu') == 'E-mail'
        assert form.get_messages() == {10: {'en': 'Email', 'hu': 'E-mail'},
                                       11: {'en': 'Name'}}

    def check_get_msg(self):
        form = Form('f1')
        form.set_messages({10: {'en': 'Email', 'hu': 'E-mail'},
                           'title': {'en': 'Title'}})
        assert form.get_msg(10, 'en') == 'Email'
        assert form.get_msg(10, 'hu') == 'E-mail'
        assert form.get_msg('title', 'en') == 'Title'
        assert form.get_msg(10, 'de') == 10
        assert form.get_msg(99, 'en') == 99
        assert form.get_msg('missing', 'en') == 'missing'
        assert form.get_msg(None, 'en') is None
        assert form.get_msg([1], 'en') == [1]
        assert form.has_msg(10, 'en')
        assert not form.has_msg(10, 'de')
        assert not form.has_msg([1], 'en')

    def check_find(self):
        form = make_form()
        assert form.find('b').get_id() == 2
        assert form.find('z') is None
        form.add_field(TextField(9, 'a', 1))
        assert form.find('a').get_id() == 1

    def check_str(self):
        s = str(make_form())
        assert s.startswith('Form - id:f1 target:submit.php')
        assert 'LabelledField: c' in s


class FormValidateTest(UTest):
    def check_valid(self):
        form = make_form()
        assert form.validate() == []
        assert form.validate('en') == []
        form.check('en')

    def check_problems(self):
        form = Form('f2')
        form.set_title(7)
        form.set_fields([TextField(1, 'a', 1), TextField(2, 'a', 2),
                         TextField(3, '', 3)])
        problems = form.validate()
        assert problems == ["no target",
                            "duplicate field name 'a'",
                            "field 3 has no name"]
        problems = form.validate('en')
        assert "message 7 has no 'en' translation" in problems
        assert "message 1 has no 'en' translation" in problems
        assert len(problems) == 7

    def check_raises(self):
        form = Form('f2')
        try:
            form.check()
            assert 0
        except FormDefinitionError as exc:
            assert exc.problems == ["no target"]
            assert str(exc) == "form 'f2': no target"
            assert exc.format() == ('Invalid form definition: f2'
                                    '<ul><li>no target</li></ul>')


class FormGenerateTest(UTest):
    def _pre(self):
        set_config(Config())

    def _post(self):
        set_config(None)

    def check_example(self):
        form = Form('f1')
        form.set_target('submit.php')
        form.set_layout(Form.VERTICAL)
        form.add_field(TextField(1, 'email', 10, length=20, maxlength=50,
                                 default=''))
        form.set_messages({10: {'en': 'Email'}})
        html = form.generate('en', False)
        assert isinstance(html, htmltext)
        assert str(html) == (
            '<form id="f1" action="submit.php" method="post"'
            ' enctype="multipart/form-data" class="formc">'
            '<p class="titlec"></p>'
            '<table class="formtable">'
            '<tr><td><span class="labelc">Email</span></td>'
            '<td class="formfield"><span class="textc">'
            '<input type="text" maxlength="50" size="20" value=""'
            ' name="email" /></span></td></tr>'
            '</table></form>')

    def check_vertical(self):
        html = str(make_form().generate('en', False))
        assert html.count('<tr>') == 3
        assert ('<tr><td><span class="labelc">A</span></td>'
                '<td class="formfield">[a]</td></tr>'
                '<tr><td><span class="labelc">B</span></td>'
                '<td class="formfield">[b]</td></tr>'
                '<tr><td><span class="labelc">C</span></td>'
                '<td class="formfield">[c]</td></tr>') in html

    def check_horizontal(self):
        html = str(make_form(Form.HORIZONTAL).generate('en', False))
        assert html.count('<tr>') == 2
        assert ('<table class="formtable"><tr>'
                '<td align="center"><span class="labelc">A</span></td>'
                '<td align="center"><span class="labelc">B</span></td>'
                '<td align="center"><span class="labelc">C</span></td>'
                '</tr><tr>'
                '<td class="formfield" align="center">[a]</td>'
                '<td class="formfield" align="center">[b]</td>'
                '<td class="formfield" align="center">[c]</td>'
                '</tr></table>') in html

    def check_full(self):
        form = make_form()
        form.set_title(1)
        html = str(form.generate('en', True))
        assert html.startswith('<html><head><title>A</title></head><body>'
                               '<form id="f1"')
        assert '<p class="titlec">A</p>' in html
        assert html.endswith('</table></form></body></html>')

    def check_defaults_from_config(self):
        set_config(Config(default_language='hu', full_page=False))
        form = make_form()
        form.set_message(1, 'hu', 'Á')
        html = str(form.generate())
        assert html.startswith('<form')
        assert '<span class="labelc">Á</span>' in html
        assert '<span class="labelc">B</span>' not in html
        assert '<span class="labelc">2</span>' in html
        form.config = Config(full_page=True)
        assert str(form.generate()).startswith('<html>')

    def check_missing_messages(self):
        form = make_form()
        form.set_title('no-title')
        html = str(form.generate('de', False))
        assert '<p class="titlec">no-title</p>' in html
        assert '<span class="labelc">1</span>' in html

    def check_escaping(self):
        form = Form('a"b')
        form.set_target('submit.php?a=1&b=2')
        form.set_mode('GET')
        form.set_title(1)
        form.set_messages({1: {'en': '<script>'}})
        html = str(form.generate('en', True))
        assert '<title>&lt;script&gt;</title>' in html
        assert ('<form id="a&quot;b" action="submit.php?a=1&amp;b=2"'
                ' method="get"') in html

    def check_no_fields(self):
        form = Form('f1')
        html = str(form.generate('en', False))
        assert '<table class="formtable"></table>' in html
        assert 'action=' not in html

    def check_check_field(self):
        form = make_form()
        form.set_fields([CheckField(1, 'c', 1, ['o0', 'o1'], length=0)])
        html = str(form.generate('en', False))
        assert '<td class="formfield"><div class="labelc">' in html
        assert html.count('type="checkbox"') == 2


def test_all():
    FormSetterTest()
    FormContentTest()
    FormValidateTest()
    FormGenerateTest()


if __name__ == "__main__":
    test_all()
