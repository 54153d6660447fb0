#!/usr/bin/python
"""This is the rule engine for a Wordle-style word-guessing game. It works out
the feedback for a guess, keeps track of what's known about each letter, checks
whether a guess is legal in hard mode, and filters a dictionary down to the
words that are still possible secrets given everything guessed so far."""

import logging  # Used for debug output about derived results; handlers are the caller's business
import typing  # Used for type-checking throughout the module
from enum import Enum, IntEnum
from typing import Iterator, Sequence, Optional, Self
from tqdm import tqdm  # Used to display progress bars for long-running operations

logger = logging.getLogger(__name__)

Position = int
Letter = str

ALPHABET = "".join(chr(letter_int) for letter_int in range(ord("a"), ord("z") + 1))
MAX_GUESSES = 6  # The number of turns a game allows before the player loses.
DEFAULT_MAX_SOLUTIONS = 20  # The default number of candidate words handed back by the finder.


class Tag(Enum):
    """A Tag is the feedback given for one position of a guess."""

    CORRECT = "correct"  # Right letter, right position
    PRESENT = "present"  # Letter is in the secret, but somewhere else
    ABSENT = "absent"  # Letter is not in the secret

    def render(self, letter: Letter) -> str:
        """This renders a guessed letter in the classic result-string convention:
        UPPERCASE for correct, lowercase for present, and a period for absent."""
        if self is Tag.CORRECT:
            return letter.upper()
        if self is Tag.PRESENT:
            return letter.lower()
        return "."

    @classmethod
    def parse(cls, char: str) -> Self:
        """The reverse of Tag.render; the letter itself is checked by the caller."""
        if char == ".":
            return cls.ABSENT
        if char.isupper():
            return cls.CORRECT
        return cls.PRESENT


Feedback = tuple[Tag, ...]


class Status(Enum):
    """A Status is what we know about a single letter of the alphabet."""

    UNKNOWN = "unknown"
    CONFIRMED = "confirmed"  # The letter appears in the secret
    ELIMINATED = "eliminated"  # The letter does not appear in the secret

    def render(self, letter: Letter) -> str:
        if self is Status.CONFIRMED:
            return letter.upper()
        if self is Status.ELIMINATED:
            return "."
        return letter.lower()


class Word:
    """A Word represents a single guessable word of any (fixed) length.
    Words also define a number of data structures to make comparison faster.
    Words can't be changed once created, since they're hashed."""

    __slots__ = ("_full_word", "_letters", "_letter_counts")

    def __init__(self, full_word: str) -> None:
        if not full_word:
            raise ValueError("Words must have at least one letter!")
        if bad_chars := set(full_word) - set(ALPHABET):
            raise ValueError(
                f"Words must only contain lowercase letters, but {full_word!r} contains {bad_chars}!"
            )

        self._full_word = full_word
        self._letters = frozenset(full_word)
        self._letter_counts = {letter: full_word.count(letter) for letter in self._letters}

    @property
    def full_word(self) -> str:
        return self._full_word

    @property
    def letters(self) -> frozenset[Letter]:
        return self._letters

    @property
    def letter_counts(self) -> dict[Letter, int]:
        """Dict of {letter: count of occurrences}. This is a copy."""
        return dict(self._letter_counts)

    def count(self, letter: Letter) -> int:
        return self._letter_counts.get(letter, 0)

    def __str__(self) -> str:
        return self.full_word

    def __repr__(self) -> str:
        return f"<wordle_engine.Word at {hex(id(self))}: full_word: {self.full_word}>"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Word):
            return self.full_word == other.full_word
        if isinstance(other, str):
            return self.full_word == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Word):
            return self.full_word < other.full_word
        if isinstance(other, str):
            return self.full_word < other
        return NotImplemented

    def __len__(self) -> int:
        return len(self.full_word)

    def __iter__(self) -> Iterator[Letter]:
        yield from self.full_word

    def __getitem__(self, position: Position) -> Letter:
        return self.full_word[position]

    def __contains__(self, letter: Letter) -> bool:
        return letter in self.letters

    def __hash__(self):
        return hash(self.full_word)

    @classmethod
    def coerce(cls, word: "Word | str") -> "Word":
        """Most of the module accepts either a Word or a plain string."""
        return word if isinstance(word, Word) else cls(word)

    def evaluate_guess(self, guessed_word: "Word | str") -> "GuessRecord":
        """This pretends that this Word is the secret in a game, and returns the
        GuessRecord that the guessed word would receive against it."""
        feedback, _ = evaluate(self, guessed_word)
        return GuessRecord(guessed_word, feedback)


class GuessRecord:
    """A GuessRecord pairs a guessed Word with the Feedback it received.
    GuessRecords are immutable; a list of them in turn order is a guess history."""

    __slots__ = ("_guess", "_feedback")

    def __init__(self, guess: Word | str, feedback: Sequence[Tag]) -> None:
        guess = Word.coerce(guess)
        feedback = tuple(feedback)
        if len(guess) != len(feedback):
            raise ValueError(
                f"Feedback has {len(feedback)} tags but the guess '{guess}' has {len(guess)} letters!"
            )
        if bad_tags := [tag for tag in feedback if not isinstance(tag, Tag)]:
            raise TypeError(f"Feedback must only contain Tags, but found {bad_tags}!")

        self._guess = guess
        self._feedback = feedback

    @property
    def guess(self) -> Word:
        return self._guess

    @property
    def feedback(self) -> Feedback:
        return self._feedback

    def __str__(self) -> str:
        return "".join(tag.render(letter) for letter, tag in zip(self._guess, self._feedback))

    def __repr__(self) -> str:
        return f"<wordle_engine.GuessRecord at {hex(id(self))}: guess: {self._guess}, results: {self}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GuessRecord):
            return NotImplemented
        return self._guess == other._guess and self._feedback == other._feedback

    def __hash__(self):
        return hash((self._guess, self._feedback))

    def __iter__(self) -> Iterator[tuple[Position, Letter, Tag]]:
        """Yields (position, letter, tag) for each position, left to right."""
        for position, (letter, tag) in enumerate(zip(self._guess, self._feedback)):
            yield position, letter, tag

    @classmethod
    def from_results(cls, guessed_word: Word | str, results: str) -> Self:
        """This allows you to create a GuessRecord from a result string.
        `results` must be the same length as the guessed word, and each char is either:
        - the guessed letter in UPPERCASE (correct letter in the correct place)
        - the guessed letter in lowercase (correct letter in the wrong place)
        - "." (letter does not appear in the secret)
        """

        guessed_word = Word.coerce(guessed_word)
        if len(results) != len(guessed_word):
            raise ValueError(
                f"`results` must have {len(guessed_word)} chars to match '{guessed_word}', "
                f"but got {results!r}!"
            )

        for letter, char in zip(guessed_word, results):
            if char != "." and char.lower() != letter:
                raise ValueError(
                    f"`results` must only contain '.' or the guessed letter '{letter}' "
                    f"in either case, but found {char!r}!"
                )

        return cls(guessed_word, [Tag.parse(char) for char in results])


GuessHistory = Sequence[GuessRecord]


class AlphabetStatus:
    """An AlphabetStatus maps each of the 26 letters to what we know about it.
    It renders as an "alphabet string": lowercase for unknown letters,
    UPPERCASE for confirmed letters and a period for eliminated ones."""

    def __init__(self, statuses: Optional[dict[Letter, Status]] = None) -> None:
        # Instantiating letters this way guarantees that we have an entry for every letter
        self._statuses = {letter: Status.UNKNOWN for letter in ALPHABET}
        if statuses:
            if bad_letters := set(statuses) - set(ALPHABET):
                raise ValueError(f"AlphabetStatus only covers a-z, but got {bad_letters}!")
            self._statuses.update(statuses)

    def __str__(self) -> str:
        return "".join(status.render(letter) for letter, status in self._statuses.items())

    def __repr__(self) -> str:
        return f"<wordle_engine.AlphabetStatus at {hex(id(self))}: {self}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlphabetStatus):
            return NotImplemented
        return self._statuses == other._statuses

    def __getitem__(self, letter: Letter) -> Status:
        return self._statuses[letter]

    def __iter__(self) -> Iterator[tuple[Letter, Status]]:
        yield from self._statuses.items()

    def __len__(self) -> int:
        return len(self._statuses)

    def letters_with(self, status: Status) -> set[Letter]:
        return {letter for letter, s in self._statuses.items() if s is status}


class WordList:
    """A WordList represents the dictionary: an ordered, sorted collection of Words
    that all share one length. It's read-only once built.

    Because the Words are kept in ascending order, `word in word_list` is answered
    with a binary search (see `locate`), so it's O(log n) rather than O(n)."""

    _words: tuple[Word, ...]
    word_length: int

    def __init__(self, words: Sequence[Word | str]) -> None:
        self._words = tuple(Word.coerce(w) for w in words)

        if not self._words:
            raise ValueError("A WordList needs at least one word!")

        self.word_length = len(self._words[0])
        if bad := [str(w) for w in self._words if len(w) != self.word_length]:
            raise ValueError(
                f"Words with wrong length (expected {self.word_length}): {bad[:5]}"
            )

        if unsorted := [
            f"{before} >= {after}"
            for before, after in zip(self._words, self._words[1:])
            if not before < after
        ]:
            raise ValueError(
                f"WordList words must be sorted ascending without duplicates, but found: {unsorted[:5]}"
            )

    def __str__(self) -> str:
        return f"WordList containing {len(self)} words"

    def __repr__(self) -> str:
        return (
            f"<wordle_engine.WordList at {hex(id(self))}: "
            f"_words: {[str(w) for w in self._words]}"
            f", word_length: {self.word_length}"
            f">"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordList):
            return NotImplemented
        return self._words == other._words

    def __contains__(self, word: Word | str) -> bool:
        return locate(word, self) is not None

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        yield from self._words

    @typing.overload
    def __getitem__(self, key: slice) -> tuple[Word, ...]:
        pass

    @typing.overload
    def __getitem__(self, key: int) -> Word:
        pass

    def __getitem__(self, key):
        # Slices come back as plain tuples, since they may well be empty
        if isinstance(key, (int, slice)):
            return self._words[key]

        raise TypeError(
            "WordList.__getitem__ expects keys that are integers or slices, "
            f"but got {type(key)} instead!"
        )


class Mask:
    """A Mask represents the set of filtering criteria that a guess history puts on
    the secret word. It's what the solution finder applies to a WordList.

    Masks built from single GuessRecords can be added together; addition is just
    a union of every criterion, so the order the records are added in doesn't matter.
    Contradictory criteria aren't an error; they simply accept no words."""

    correct_positions: dict[Position, set[Letter]]  # Letters that must appear in a certain position
    incorrect_positions: dict[Position, set[Letter]]  # Letters that must NOT appear in a certain position
    correct_letters: set[Letter]  # Letters that must appear somewhere (the "present" ones)
    incorrect_globals: set[Letter]  # Letters that must NOT appear anywhere

    def __init__(
        self,
        correct_positions: Optional[dict[Position, set[Letter]]] = None,
        incorrect_positions: Optional[dict[Position, set[Letter]]] = None,
        correct_letters: Optional[set[Letter]] = None,
        incorrect_globals: Optional[set[Letter]] = None,
    ) -> None:
        self.correct_positions = {
            position: set(letters)
            for position, letters in (correct_positions or {}).items()
            if letters
        }
        self.incorrect_positions = {
            position: set(letters)
            for position, letters in (incorrect_positions or {}).items()
            if letters
        }
        self.correct_letters = set(correct_letters) if correct_letters else set()
        self.incorrect_globals = set(incorrect_globals) if incorrect_globals else set()

    def __str__(self) -> str:
        return "Word must have " + " and ".join(
            [f"{l} in position {p}" for p, ls in sorted(self.correct_positions.items()) for l in sorted(ls)]
            + [f"not {l} in position {p}" for p, ls in sorted(self.incorrect_positions.items()) for l in sorted(ls)]
            + [f"{l} somewhere" for l in sorted(self.correct_letters)]
            + [f"{l} nowhere" for l in sorted(self.incorrect_globals)]
        )

    def __repr__(self) -> str:
        return (
            f"<wordle_engine.Mask at {hex(id(self))}: "
            f"correct_positions: {self.correct_positions}"
            f", incorrect_positions: {self.incorrect_positions}"
            f", correct_letters: {self.correct_letters}"
            f", incorrect_globals: {self.incorrect_globals}"
            f">"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mask):
            return NotImplemented
        return all([
            self.correct_positions == other.correct_positions,
            self.incorrect_positions == other.incorrect_positions,
            self.correct_letters == other.correct_letters,
            self.incorrect_globals == other.incorrect_globals,
        ])

    def __add__(self, other: Self) -> Self:
        """This combines two Masks together to yield a new Mask
        that incorporates the information from both."""

        correct_positions = {p: set(ls) for p, ls in self.correct_positions.items()}
        for pos, letters in other.correct_positions.items():
            correct_positions[pos] = correct_positions.get(pos, set()) | letters

        incorrect_positions = {p: set(ls) for p, ls in self.incorrect_positions.items()}
        for pos, letters in other.incorrect_positions.items():
            incorrect_positions[pos] = incorrect_positions.get(pos, set()) | letters

        return Mask(
            correct_positions = correct_positions,
            incorrect_positions = incorrect_positions,
            correct_letters = self.correct_letters | other.correct_letters,
            incorrect_globals = self.incorrect_globals | other.incorrect_globals,
        )

    def __radd__(self, other: Self) -> Self:
        return self.__add__(other)

    @classmethod
    def from_guess_record(cls, record: GuessRecord) -> Self:
        """This creates a Mask from a single guess and its feedback.

        Note that an ABSENT tag both bans the letter from its own position and bans
        it from the word entirely, even if the same letter got a different tag
        elsewhere in the guess. A history like that accepts no words at all."""

        correct_positions: dict[Position, set[Letter]] = {}
        incorrect_positions: dict[Position, set[Letter]] = {}
        correct_letters = set()
        incorrect_globals = set()

        for position, letter, tag in record:
            if tag is Tag.CORRECT:
                correct_positions.setdefault(position, set()).add(letter)

            elif tag is Tag.PRESENT:
                incorrect_positions.setdefault(position, set()).add(letter)
                correct_letters.add(letter)

            else:
                incorrect_positions.setdefault(position, set()).add(letter)
                incorrect_globals.add(letter)

        return cls(
            correct_positions = correct_positions,
            incorrect_positions = incorrect_positions,
            correct_letters = correct_letters,
            incorrect_globals = incorrect_globals,
        )

    @classmethod
    def from_history(cls, history: GuessHistory) -> Self:
        """This adds up the Masks of every GuessRecord in a history."""
        return sum((cls.from_guess_record(record) for record in history), cls())

    def is_word_accepted(self, word: Word | str) -> bool:
        """This examines an input word and determines whether
        the word meets this Mask's filtering criteria."""

        word = Word.coerce(word)

        # If the word doesn't have the letters we know are in specific positions, reject it
        for position, letters in self.correct_positions.items():
            if any(word[position] != letter for letter in letters):
                return False

        # If the word has any of the specific position letters we don't want, reject it
        for position, letters in self.incorrect_positions.items():
            if word[position] in letters:
                return False

        # If the word doesn't have all of the letters we want, reject it
        if not self.correct_letters.issubset(word.letters):
            return False

        # If the word has any of the letters we don't want, reject it
        if self.incorrect_globals.intersection(word.letters):
            return False

        return True

    def filter_words(
        self,
        words: WordList,
        max_words: Optional[int] = None,
        show_progress: bool = False,
    ) -> list[Word]:
        """This applies this Mask to a WordList, keeping the list's order.
        If `max_words` is given, the scan stops once that many words have been accepted."""

        if max_words is not None and max_words < 1:
            return []

        accepted = []
        for word in tqdm(words, desc = "Filtering words", disable = not show_progress):
            if self.is_word_accepted(word):
                accepted.append(word)
                if max_words is not None and len(accepted) >= max_words:
                    break
        return accepted


def _check_lengths(history: GuessHistory, length: int, what: str) -> None:
    """Every guess in a session must have the same length; this raises if one doesn't."""
    for turn, record in enumerate(history, start = 1):
        if len(record.guess) != length:
            raise ValueError(
                f"Guess #{turn} '{record.guess}' has {len(record.guess)} letters, "
                f"but the {what} has {length}!"
            )


def evaluate(secret: Word | str, guess: Word | str) -> tuple[Feedback, bool]:
    """This compares a guess against the secret word and returns the Feedback for
    the guess, along with whether the guess is an exact match for the secret.

    Feedback is worked out in two passes. The first tags every position where the
    guess and secret agree as CORRECT. The second tags each remaining position
    PRESENT if its letter occurs anywhere in the secret, and ABSENT otherwise.

    Note that the second pass only checks whether the secret contains the letter;
    it doesn't "use up" occurrences the way the official game does. So every repeat
    of a letter in the guess is PRESENT even if the secret only has one of it:
    against "apple" the guess "paper" gets "paPe.", while against "place" it gets "Pape."
    """

    secret = Word.coerce(secret)
    guess = Word.coerce(guess)
    if len(secret) != len(guess):
        raise ValueError(
            f"The guess '{guess}' has {len(guess)} letters but the secret has {len(secret)}!"
        )

    tags: list[Optional[Tag]] = [None] * len(guess)

    # Pass 1 - exact matches
    for position, (secret_letter, guess_letter) in enumerate(zip(secret, guess)):
        if secret_letter == guess_letter:
            tags[position] = Tag.CORRECT

    # Pass 2 - everything else
    for position, guess_letter in enumerate(guess):
        if tags[position] is not None:
            continue
        tags[position] = Tag.PRESENT if secret.count(guess_letter) >= 1 else Tag.ABSENT

    return tuple(tags), secret == guess


def locate(word: Word | str, word_list: WordList) -> Optional[int]:
    """This finds the index of `word` in the (sorted) WordList using a binary search.
    It returns None if the word isn't in the list."""

    target = str(word)
    low, high = 0, len(word_list) - 1
    while low <= high:
        mid = (low + high) // 2
        candidate = word_list[mid].full_word
        if candidate == target:
            return mid
        if candidate < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def compute_status(history: GuessHistory) -> AlphabetStatus:
    """This works out what's known about each letter of the alphabet from a guess history.
    Every letter starts out UNKNOWN. The history is folded in turn order: each guessed
    letter becomes ELIMINATED if it was tagged ABSENT, and CONFIRMED otherwise.
    When the same letter gets tagged more than once, the last tag wins."""

    statuses: dict[Letter, Status] = {}
    for record in history:
        for _, letter, tag in record:
            statuses[letter] = Status.ELIMINATED if tag is Tag.ABSENT else Status.CONFIRMED
    return AlphabetStatus(statuses)


def is_valid_hard_guess(history: GuessHistory, next_guess: Word | str) -> bool:
    """This evaluates whether `next_guess` is allowed in hard mode, which requires that
    any revealed hints are used in subsequent guesses:
    - A letter that was CORRECT must be used in the same spot in the next guess.
    - A letter that was PRESENT can't be used in the same spot again,
      but must be used somewhere else in the next guess.
    - A letter that was ABSENT can't be used anywhere in the next guess.

    Records are checked in turn order and positions left to right, and the first
    broken rule makes the guess invalid.

    The ABSENT rule bans the letter outright, even when the same guess also has that
    letter tagged CORRECT or PRESENT at another position. This can reject some words
    that would be legal under the official game's rules."""

    next_guess = Word.coerce(next_guess)
    _check_lengths(history, len(next_guess), "next guess")

    for turn, record in enumerate(history, start = 1):
        for position, letter, tag in record:
            if tag is Tag.CORRECT:
                if next_guess[position] != letter:
                    logger.debug(
                        "Hard mode: '%s' must have '%s' in position %d (guess #%d)",
                        next_guess, letter, position, turn,
                    )
                    return False

            elif tag is Tag.ABSENT:
                if letter in next_guess:
                    logger.debug(
                        "Hard mode: '%s' uses eliminated letter '%s' (guess #%d)",
                        next_guess, letter, turn,
                    )
                    return False

            else:
                if next_guess[position] == letter or not any(
                    other == letter
                    for other_position, other in enumerate(next_guess)
                    if other_position != position
                ):
                    logger.debug(
                        "Hard mode: '%s' must move '%s' out of position %d (guess #%d)",
                        next_guess, letter, position, turn,
                    )
                    return False

    return True


def find_solutions(
    history: GuessHistory,
    word_list: WordList,
    max_solutions: int = DEFAULT_MAX_SOLUTIONS,
    show_progress: bool = False,
) -> list[Word]:
    """This returns the words in `word_list` that could still be the secret, given
    every guess and its feedback so far. At most `max_solutions` words are returned,
    in the word list's own (sorted) order.

    A word is kept only if, for every guess in the history:
    - it has the guessed letter at each CORRECT position,
    - it doesn't have the guessed letter at each PRESENT or ABSENT position,
    and, across the whole history, it contains every letter that was ever PRESENT
    and none of the letters that were ever ABSENT.

    An empty history rules nothing out, so the first `max_solutions` words come back."""

    if not word_list:
        raise ValueError("find_solutions needs a non-empty WordList!")
    if max_solutions < 1:
        raise ValueError(f"max_solutions must be at least 1, but got {max_solutions}!")
    _check_lengths(history, word_list.word_length, "word list")

    mask = Mask.from_history(history)
    solutions = mask.filter_words(word_list, max_words = max_solutions, show_progress = show_progress)
    logger.debug("Found %d solution(s) for %d guess(es): %s", len(solutions), len(history), mask)
    return solutions


class Difficulty(IntEnum):
    """How strictly a Game checks guesses before accepting them."""

    EASY = 0  # Any word of the right length
    NORMAL = 1  # Must be in the dictionary
    HARD = 2  # Must be in the dictionary and use every hint revealed so far


class InvalidGuessError(ValueError):
    """Raised when a Game refuses a guess. A refused guess doesn't use up a turn."""


class WrongLengthError(InvalidGuessError):
    pass


class NotInDictionaryError(InvalidGuessError):
    pass


class HardModeViolationError(InvalidGuessError):
    pass


class Game:
    """A Game is a single session of Wordle against a known secret word.
    It holds the guess history and enforces the session rules; it does no I/O,
    so a front end is expected to turn InvalidGuessErrors into re-prompts."""

    def __init__(
        self,
        secret: Word | str,
        word_list: WordList,
        difficulty: Difficulty = Difficulty.NORMAL,
        max_guesses: int = MAX_GUESSES,
    ) -> None:
        secret = Word.coerce(secret)
        if secret not in word_list:
            raise ValueError(f"The secret '{secret}' is not in the word list!")
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be at least 1, but got {max_guesses}!")

        self._secret = secret
        self._word_list = word_list
        self._difficulty = Difficulty(difficulty)
        self._max_guesses = max_guesses
        self._history: list[GuessRecord] = []
        self._won = False

    def __repr__(self) -> str:
        return (
            f"<wordle_engine.Game at {hex(id(self))}: "
            f"difficulty: {self._difficulty.name}"
            f", guesses: {[str(r) for r in self._history]}"
            f", remaining_guesses: {self.remaining_guesses}"
            f">"
        )

    @classmethod
    def from_word_number(
        cls,
        word_list: WordList,
        number: int,
        difficulty: Difficulty = Difficulty.NORMAL,
        max_guesses: int = MAX_GUESSES,
    ) -> Self:
        """This starts a Game whose secret is the word at index `number` of the word list."""
        if not 0 <= number < len(word_list):
            raise ValueError(
                f"Invalid word number {number}: must be between 0 and {len(word_list) - 1}!"
            )
        return cls(word_list[number], word_list, difficulty, max_guesses)

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def history(self) -> tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def is_won(self) -> bool:
        return self._won

    @property
    def is_over(self) -> bool:
        return self._won or len(self._history) >= self._max_guesses

    @property
    def remaining_guesses(self) -> int:
        return self._max_guesses - len(self._history)

    @property
    def alphabet(self) -> AlphabetStatus:
        return compute_status(self._history)

    @property
    def secret(self) -> Word:
        """The secret is only revealed once the game is over."""
        if not self.is_over:
            raise RuntimeError("The game is still in progress!")
        return self._secret

    def guess(self, word: Word | str) -> GuessRecord:
        """This submits a guess. The checks run in the same order a player sees them:
        length first, then the dictionary (NORMAL and HARD), then the hard-mode rules."""

        if self.is_over:
            raise RuntimeError("The game is already over!")

        if len(word) != self._word_list.word_length:
            raise WrongLengthError(
                f"Wrong number of letters: '{word}' has {len(word)}, "
                f"but guesses need {self._word_list.word_length}!"
            )
        try:
            word = Word.coerce(word)
        except ValueError as ex:
            raise InvalidGuessError(str(ex)) from ex

        if self._difficulty >= Difficulty.NORMAL and word not in self._word_list:
            raise NotInDictionaryError(f"'{word}' is not in the dictionary!")

        if self._difficulty == Difficulty.HARD and not is_valid_hard_guess(self._history, word):
            raise HardModeViolationError(f"'{word}' doesn't use all of the hints so far!")

        record = self._secret.evaluate_guess(word)
        self._history.append(record)
        self._won = word == self._secret
        logger.debug(
            "Guess #%d: '%s' => '%s'%s",
            len(self._history), word, record, " (solved)" if self._won else "",
        )
        return record

    def suggestions(self, max_solutions: int = DEFAULT_MAX_SOLUTIONS) -> list[Word]:
        """The dictionary words that are still consistent with this game's guesses."""
        return find_solutions(self._history, self._word_list, max_solutions)
