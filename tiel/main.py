"""Command-line front end of the TiEL interpreter: runs a .tiel file (optionally dumping its tokens and AST first), or
starts the interactive shell when no file is given. Also uses the error handling context manager. Installed as the
`tiel` console script.
"""

import argparse

from tiel.lang.error import ErrorHandler, GenericException
from tiel.lang.session import Session, parse, scan
from tiel.lang.shell import Shell
from tiel.syntax.printer import AstPrinter


def build_parser():
    parser = argparse.ArgumentParser(prog="tiel", description="Tree-walking interpreter for the TiEL language.")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--tokens", action="store_true", help="scan the source and print the tokens")
    parser.add_argument("--ast", action="store_true", help="scan and parse the source and print the AST")
    parser.add_argument("--trace", action="store_true", help="report each finished pipeline phase")
    return parser


def print_tokens(source):
    print("Tokens:")
    for token in scan(source):
        print(token)
    print()


def print_ast(source):
    print("AST:")
    print(AstPrinter().print(parse(source)))


def main(argv=None):
    """Runs the TiEL interpreter. Called from the tiel executable script."""
    args = build_parser().parse_args(argv)

    with ErrorHandler(trace=args.trace) as error_handler:
        if args.file is None:
            error_handler.fatal = False
            Shell(Session(error_handler=error_handler)).cmdloop()
            return

        try:
            with open(args.file, "r", encoding="utf-8") as file:
                source = file.read()
        except OSError:
            raise GenericException(f"'{args.file}' could not be opened")

        error_handler.register_file(args.file, source)

        if args.tokens:
            print_tokens(source)
        if args.ast:
            print_ast(source)

        Session(error_handler=error_handler).run(source)


if __name__ == "__main__":
    main()
