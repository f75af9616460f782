"""
This script runs a calculator over polynomials with complex coefficients, one statement per line, read from
standard input or from a file. The statements are described in ringpoly.evaluator; type `exit` to leave.
"""

import argparse
import sys

import ringpoly
from ringpoly.evaluator import Environment, evaluate

USER_INPUT_PROMPT = 'User Input:      '
TERMINAL_OUTPUT_PROMPT = 'Terminal Output: '

USAGE = '''\
To use this calculator, you can use two types of statements:
- Polynomial definitions, which are of the following form:
      A = (1.23 + 3.45i)X2 + (-2.0 - 1.0i)X + (-1.0 + 0.0i)
      B = (1 - 2i)X3 + (-1 + 0i)
- Expressions, which let you add/subtract/multiply polynomials.
  There are no parentheses and members are evaluated from left to right:
      A + B
      A * B + B

You can type `exit` to exit.
---------'''

parser = argparse.ArgumentParser('Evaluate expressions over complex polynomials')
parser.add_argument('--ring', type=int, help='Evaluate expressions in C[X]/(X^ring - 1)')
parser.add_argument('--file', type=str, help='Read statements from this file instead of standard input')
parser.add_argument('--quiet', action='store_true', help='Do not print the usage banner or the prompts')

args = parser.parse_args()
if args.ring is not None and args.ring < 1:
    parser.error('--ring must be at least 1')


def prompt(text: str):
    if not args.quiet:
        print(text, end='', flush=True)


def main(lines):
    env = Environment(ring=args.ring)

    if not args.quiet:
        print(USAGE)
        if env.ring is not None:
            print(f"Expressions are reduced modulo X^{env.ring} - 1.")

    prompt(USER_INPUT_PROMPT)
    for line in lines:
        line = line.strip()
        if line == 'exit':
            break

        if line:
            try:
                outcome = evaluate(env, line)
            except ringpoly.RingPolyError as e:
                print(f"{TERMINAL_OUTPUT_PROMPT}{e}", file=sys.stderr)
            else:
                if outcome.is_definition:
                    print(f"{TERMINAL_OUTPUT_PROMPT}Registered polynomial {outcome.name} with definition {outcome.value}")
                else:
                    print(f"{TERMINAL_OUTPUT_PROMPT}{outcome.value}")

        prompt(USER_INPUT_PROMPT)


if args.file is not None:
    with open(args.file) as f:
        main(f)
else:
    main(sys.stdin)
