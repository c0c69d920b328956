"""A sample form, rendered by "python -m formapi render".
"""

from formapi.form import Form, TextField, CheckField, RadioField, \
    SelectField, HiddenField

MESSAGES = {
    1: {'en': 'Registration', 'hu': 'Regisztráció'},
    10: {'en': 'Name', 'hu': 'Név'},
    11: {'en': 'Email', 'hu': 'E-mail'},
    12: {'en': 'Your e-mail address', 'hu': 'Az e-mail címe'},
    20: {'en': 'Interests', 'hu': 'Érdeklődés'},
    21: {'en': 'Pick any number', 'hu': 'Tetszőleges számú választható'},
    22: {'en': 'Surveying', 'hu': 'Földmérés'},
    23: {'en': 'GIS', 'hu': 'Térinformatika'},
    24: {'en': 'Photogrammetry', 'hu': 'Fotogrammetria'},
    25: {'en': 'Remote sensing', 'hu': 'Távérzékelés'},
    26: {'en': 'Geodesy', 'hu': 'Geodézia'},
    27: {'en': 'Cartography', 'hu': 'Térképészet'},
    30: {'en': 'Level', 'hu': 'Szint'},
    31: {'en': 'Student', 'hu': 'Hallgató'},
    32: {'en': 'Professional', 'hu': 'Szakember'},
    40: {'en': 'Language', 'hu': 'Nyelv'},
    41: {'en': 'English', 'hu': 'Angol'},
    42: {'en': 'Hungarian', 'hu': 'Magyar'},
}


def create_form(config=None):
    form = Form('registration', config=config)
    form.set_name('registration')
    form.set_target('register')
    form.set_mode('post')
    form.set_title(1)
    form.set_messages(MESSAGES)
    form.add_field(TextField(1, 'name', 10, length=30, maxlength=80,
                             requested=True))
    form.add_field(TextField(2, 'email', 11, length=30, maxlength=80,
                             help=12, requested=True))
    form.add_field(CheckField(3, 'interests', 20, [22, 23, 24, 25, 26, 27],
                              length=3, help=21))
    form.add_field(RadioField(4, 'level', 30, [31, 32], length=0,
                              default=0))
    form.add_field(SelectField(5, 'lang', 40, [41, 42], default=0))
    form.add_field(HiddenField(6, 'source', default='demo'))
    return form
