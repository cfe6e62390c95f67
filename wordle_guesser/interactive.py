"""
interactive.py

Line protocol for playing alongside a real Wordle game.

Each line is one of:

    WORD MASK            feedback for a word you played
    MASK                 feedback for the suggested word
    REMOVE [WORD]        the game does not accept WORD
    ELIMINATE [WORD]     WORD is valid but not the answer
    ALLOW [WORD]         undo REMOVE
    CONSIDER [WORD]      undo ELIMINATE
    REMAINING            list the remaining possible answers
    HARD                 switch to hard mode

Masks use '-' for gray, '+' for yellow and '#' for green. Edits without
a word apply to the current suggestion.
"""

from collections import namedtuple

from wordle_guesser.entropy import NoCandidatesError
from wordle_guesser.patterns import Guess, format_mask, is_solved, parse_mask
from wordle_guesser.words import to_word


Command = namedtuple("Command", ["kind", "word", "mask"])

EDITS = {
    "REMOVE": "remove",
    "ELIMINATE": "eliminate",
    "ALLOW": "allow",
    "CONSIDER": "consider",
}

EDIT_MESSAGES = {
    "remove": "Adjusted to the fact that {word} is not allowed.",
    "eliminate": "Adjusted to the assumption that {word} is not the answer.",
    "allow": "Adjusted to the fact that {word} is allowed.",
    "consider": "Adjusted to the assumption that {word} might be the answer.",
}

UNRECOGNIZED = Command("unrecognized", None, None)
UNRECOGNIZED_MESSAGE = "Error: Command not recognized."

INTRO = (
    "Type history. Each line is: word + space + pattern.",
    "'-' for Wrong/Gray, '#' for Correct/Green, '+' for Misplaced/Yellow.",
    "If you follow the suggestion, you can just type the pattern.",
    "If the suggestion is not allowed, type 'REMOVE'; 'REMOVE word' removes any word.",
    "If a word is allowed but not the answer, use 'ELIMINATE' instead.",
    "'ALLOW' undoes 'REMOVE' and 'CONSIDER' undoes 'ELIMINATE'.",
    "To list all remaining possible words, type 'REMAINING'.",
    "To enter hard mode, type 'HARD'.",
)


def _as_word(token):
    try:
        return to_word(token)
    except ValueError:
        return None


def _as_mask(token):
    try:
        return parse_mask(token)
    except ValueError:
        return None


def parse_command(line: str) -> Command:
    tokens = line.split()
    if not tokens:
        return UNRECOGNIZED
    head, args = tokens[0], tokens[1:]

    if head in EDITS:
        if not args:
            return Command(EDITS[head], None, None)
        word = _as_word(args[0]) if len(args) == 1 else None
        return Command(EDITS[head], word, None) if word else UNRECOGNIZED

    if head in ("REMAINING", "HARD"):
        return Command(head.lower(), None, None) if not args else UNRECOGNIZED

    mask = _as_mask(head)
    if mask is not None:
        return Command("feedback", None, mask) if not args else UNRECOGNIZED

    word = _as_word(head)
    if word is not None and len(args) == 1:
        mask = _as_mask(args[0])
        if mask is not None:
            return Command("feedback", word, mask)

    return UNRECOGNIZED


class Session:
    """History plus the current suggestion for one interactive guesser."""

    def __init__(self, guesser):
        self.guesser = guesser
        self.history = []
        self.suggestion = None
        self.stale = True

    def suggest(self):
        if self.stale:
            self.suggestion = None
            self.suggestion = self.guesser.guess(self.history)
            self.stale = False
        return self.suggestion

    def apply(self, command: Command) -> str:
        kind = command.kind
        if kind == "unrecognized":
            return UNRECOGNIZED_MESSAGE

        if kind == "remaining":
            words = self.guesser.remaining()
            if not words:
                return "No possible answers remain."
            return " ".join(w.upper() for w in words)

        if kind == "hard":
            self.guesser.hard()
            self.stale = True
            return "Hard mode activated."

        word = command.word or self.suggestion
        if word is None:
            return UNRECOGNIZED_MESSAGE

        if kind in EDIT_MESSAGES:
            getattr(self.guesser, kind)(word)
            self.stale = True
            return EDIT_MESSAGES[kind].format(word=word.upper())

        self.stale = True
        if is_solved(command.mask):
            self.history = []
            self.guesser.new_game()
            return f"Solved with {word.upper()}. Starting a new game."

        self.history.append(Guess(word, command.mask))
        return f"Recorded {word.upper()} {format_mask(command.mask)}."


def run_session(guesser, read=input, write=print):
    """Suggest, read a line, apply it; repeat until input runs out."""
    for line in INTRO:
        write(line)

    session = Session(guesser)
    while True:
        if session.stale:
            try:
                write(f"Suggested guess is: {session.suggest().upper()}")
            except NoCandidatesError as exc:
                session.stale = False
                write(f"Error: {exc}. Use CONSIDER to add a word back.")

        try:
            line = read()
        except EOFError:
            return session

        write(session.apply(parse_command(line)))
