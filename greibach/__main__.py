#!/usr/bin/env python3

import logging
from argparse import ArgumentParser
from sys import exit as sys_exit

from .normalize import stages
from .parser import ParseError, parse_file
from .transformations import REVERSED, MalformedGrammarError, PreconditionError

parser = ArgumentParser(prog="greibach", description="Transform a context-free grammar into Greibach normal form.")
parser.add_argument("grammar", help="Grammar file, one `lhs ::= s1 s2 ...` production per line")
parser.add_argument("-r", "--reversed", dest="flags", action="store_const", const=REVERSED, default=0,
                    help="Reverse the grammar before the transformation")
parser.add_argument("-c", "--check", dest="check", action="store_const", const=True, default=False,
                    help="Only check whether the grammar is in Greibach normal form")
parser.add_argument("-q", "--quiet", dest="quiet", action="store_const", const=True, default=False,
                    help="Don't output the resulting grammar")
parser.add_argument("-v", "--verbose", dest="verbose", action="store_const", const=True, default=False,
                    help="Debug mode, print every intermediate grammar")


def main(argv=None):
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        grammar = parse_file(args.grammar)
        if args.verbose:
            print("Parsed grammar")
            print(grammar, end="\n\n")

        if args.check:
            in_gnf = grammar.apply_options(args.flags).in_greibach_normal_form()
            if not args.quiet:
                print("in Greibach normal form" if in_gnf else "not in Greibach normal form")
            return int(not in_gnf)

        for title, construct in stages(args.flags):
            grammar = construct(grammar)
            if args.verbose:
                print(title)
                print(grammar, end="\n\n")
    except (OSError, ParseError, MalformedGrammarError, PreconditionError) as exc:
        parser.exit(2, "{}: error: {}\n".format(parser.prog, exc))

    if not args.quiet:
        print(grammar)
    return 0


if __name__ == "__main__":
    sys_exit(main())
