from os import isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
import regex

from .angle import AngleMode
from .engine import Engine
from .formatting import DisplayFormat
from .functions import FUNCTIONS
from .memory import Variable
from .util import CalcError, CalcSyntaxError, wrap_user_errors


# Display glyphs the lexer doesn't read, to what it does.
GLYPHS = str.maketrans({
    '\N{MINUS SIGN}': '-',
    '\N{MULTIPLICATION SIGN}': '*',
    '\N{DIVISION SIGN}': '/',
    '\N{LOGICAL AND}': '^',
})


def normalize(line):
    '''
    Canonicalize a typed line: operator glyphs, surrounding whitespace.
    '''
    return line.translate(GLYPHS).strip()


class InteractiveInput:
    def __init__(self, prompt, engine):
        self.prompt = prompt
        self.engine = engine

    def toolbar(self):
        '''
        Angle mode, display format and M+ total, like the display's flags.
        '''
        return ' {}  {}  M={}'.format(
            self.engine.angle.label,
            self.engine.format,
            self.engine.format_result(self.engine.recall_accumulator()))

    def __iter__(self):
        try:
            words = list(FUNCTIONS) + ['Ans', '\N{GREEK SMALL LETTER PI}']
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # In memory only; nothing persists.
                                    history=None,
                                    completer=WordCompleter(words),
                                    complete_while_typing=False,
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator engine.

    Lines are expressions, or register commands starting with a colon.
    '''

    DEFAULT_PROMPT = '> '
    COMMAND = regex.compile(r':(?<name>\S+)\s*(?<arg>.*)')

    def _print_error(self, e):
        '''
        Show a calculator error, pointing at the offending character if known.
        '''
        print(e, file=sys.stderr)
        if isinstance(e, CalcSyntaxError) and \
           e.text is not None and e.index is not None:
            print(e.text, file=sys.stderr)
            print(' ' * e.index + '^', file=sys.stderr)
        if self.args.verbose:
            traceback.print_exc(file=sys.stderr)

    def _show(self, value, label=None):
        text = self.engine.format_result(value)
        if label is None:
            print(text)
        else:
            print(label, '=', text)

    def _value(self, expression):
        '''
        Evaluate expression if given, else Ans.
        '''
        if expression:
            return self.engine.evaluate(normalize(expression))
        return self.engine.ans

    def store(self, name):
        '''
        :sto V, store Ans into V.
        '''
        variable = Variable.lookup(name)
        self.engine.store(variable, self.engine.ans)
        self._show(self.engine.recall(variable), variable.value)

    def recall(self, name):
        '''
        :rcl V, show V.
        '''
        variable = Variable.lookup(name)
        self._show(self.engine.recall(variable), variable.value)

    def accumulate(self, expression):
        '''
        :m+ [expr], add expr (or Ans) to M.
        '''
        self.engine.accumulate(self._value(expression))
        self._show(self.engine.recall_accumulator(), 'M')

    def deaccumulate(self, expression):
        '''
        :m- [expr], subtract expr (or Ans) from M.
        '''
        self.engine.deaccumulate(self._value(expression))
        self._show(self.engine.recall_accumulator(), 'M')

    def recall_accumulator(self, _):
        '''
        :mr, show M.
        '''
        self._show(self.engine.recall_accumulator(), 'M')

    def clear_accumulator(self, _):
        '''
        :mc, zero M.
        '''
        self.engine.clear_accumulator()
        self._show(self.engine.recall_accumulator(), 'M')

    def cycle_angle(self, _):
        '''
        :mode, next angle unit.
        '''
        print(self.engine.cycle_angle().name.lower())

    @wrap_user_errors('Bad display format {1!r}')
    def set_format(self, spec):
        '''
        :fmt norm|sci|eng|fixN, set display format.
        '''
        self.engine.format = DisplayFormat.parse(spec)
        print(self.engine.format)

    def print_history(self, _):
        '''
        :hist, show past evaluations, oldest first.
        '''
        for text, result in self.engine.history:
            print(text, '=', self.engine.format_result(result))

    def reset(self, _):
        '''
        :ac, clear everything.
        '''
        self.engine.reset()

    def print_help(self, _):
        '''
        :help, list functions, variables and commands.
        '''
        print('functions:', *FUNCTIONS, file=sys.stderr)
        print('variables:', *Variable.spellings(), file=sys.stderr)
        for name, command in type(self).COMMANDS.items():
            print(':' + name.ljust(6), command.__doc__.strip(),
                  file=sys.stderr)

    COMMANDS = {
        'sto': store,
        'rcl': recall,
        'm+': accumulate,
        'm-': deaccumulate,
        'mr': recall_accumulator,
        'mc': clear_accumulator,
        'mode': cycle_angle,
        'fmt': set_format,
        'hist': print_history,
        'ac': reset,
        'help': print_help,
    }

    def command(self, name, arg):
        try:
            command = type(self).COMMANDS[name.lower()]
        except KeyError:
            raise CalcError('No such command :{}'.format(name)) from None
        command(self, arg)

    def execute(self, line):
        '''
        Run one normalized, non-empty line.
        '''
        match = type(self).COMMAND.fullmatch(line)
        if match is not None:
            self.command(match.group('name'), match.group('arg'))
        else:
            self._show(self.engine.evaluate(line))

    def executor(self):
        '''
        Run the calculator over every input line.
        '''
        for line in self.args.expressions:
            line = normalize(line)
            if not line:
                continue
            # A bad line never stops the session.
            try:
                self.execute(line)
            except CalcError as e:
                self._print_error(e)

    def dumper(self):
        '''
        Dump the token stream of each line.
        '''
        for line in self.args.expressions:
            try:
                tokens = self.engine.lexer.tokenize(normalize(line),
                                                    self.engine.ans,
                                                    self.engine.memory)
            except CalcError as e:
                self._print_error(e)
                continue
            print(*tokens, sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(self.engine.lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return an interactive prompt session if either:
        - prompt explicitly specified.
        - both stdin/out are a tty

        Else plain stdin.
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    engine=self.engine)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Scientific calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks of errors')
        self.argument_parser.add_argument('-a', '--angle',
                                          type=AngleMode.parse,
                                          default=Engine.DEFAULT_ANGLE,
                                          help='deg, rad or gra')
        self.argument_parser.add_argument('-f', '--format',
                                          type=DisplayFormat.parse,
                                          default=Engine.DEFAULT_FORMAT,
                                          help='norm, sci, eng or fixN')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's arguments.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.engine = Engine(angle=self.args.angle, format=self.args.format)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
