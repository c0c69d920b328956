import sys
from optparse import OptionParser

USAGE = "Usage: formapi (render [options] | version)"

def usage():
    print(USAGE, file=sys.stderr)
    raise SystemExit(2)

def get_render_parser():
    parser = OptionParser(usage="formapi render [options]")
    parser.set_description("Print the HTML of the demo form.")
    parser.add_option(
        '--lang', dest="lang", default=None,
        help="Language of the messages. (default=DEFAULT_LANGUAGE)")
    parser.add_option(
        '--fragment', dest="full", default=None, action="store_false",
        help="Print only the <form> element, not a full HTML page.")
    parser.add_option(
        '--horizontal', dest="horizontal", default=False,
        action="store_true",
        help="Put all labels in one row and all controls in the next.")
    parser.add_option(
        '--config', dest="config", default=None,
        help="Python file with configuration variables.")
    return parser

def render(args):
    from formapi.config import Config, set_config
    from formapi.demo import create_form
    from formapi.form import Form
    (options, args) = get_render_parser().parse_args(args=args)
    config = Config()
    if options.config:
        config.read_file(options.config)
    set_config(config)
    form = create_form()
    if options.horizontal:
        form.set_layout(Form.HORIZONTAL)
    print(form.generate(options.lang, options.full))

def main():
    if len(sys.argv) <= 1:
        usage()

    cmd = sys.argv[1]
    if cmd == 'render':
        render(sys.argv[2:])
    elif cmd == 'version':
        import formapi
        print(formapi.__version__)
    else:
        usage()


if __name__ == '__main__':
    main()
