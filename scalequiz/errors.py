from __future__ import annotations

"""Exception types for scalequiz.

Three families: parse errors (bad input text), precondition errors
(caller asked for something the data cannot support) and access errors
(a Note was asked for information it never had).
"""

from typing import Optional


class ScaleQuizError(Exception):
    """Base class for every error raised by scalequiz."""


# --- Parse errors ---

class ParseError(ScaleQuizError, ValueError):
    pass


class InvalidNoteNameError(ParseError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Note name '{text}' does not start with a valid note letter")
        self.text = text


class ConflictingAccidentalsError(ParseError):
    def __init__(self, text: str) -> None:
        super().__init__(f"'{text}' has both flats and sharps")
        self.text = text


class MissingDegreeError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"No scale degree found in '{token}'")
        self.token = token


class MalformedDegreeError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"'{token}' is not a scale degree (expected e.g. 'b3' or '#4')")
        self.token = token


class CatalogueError(ParseError):
    """Raised while loading a scale catalogue."""


class CatalogueFileError(CatalogueError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Unable to open the scale catalogue: {path}")
        self.path = path


class MalformedRowError(CatalogueError):
    def __init__(self, row: int, found: int) -> None:
        super().__init__(f"Expected 3 non-empty columns (name;difficulty;scale) on row {row}, found {found}")
        self.row = row
        self.found = found


class UnknownDifficultyError(CatalogueError):
    def __init__(self, row: int, column: int, label: str) -> None:
        super().__init__(f"Invalid difficulty value '{label}' found during parsing file! Row: {row}, Column: {column}")
        self.row = row
        self.column = column
        self.label = label


class ScaleParseFailedError(CatalogueError):
    def __init__(self, row: int, reason: Optional[str] = None) -> None:
        msg = f"Failed parsing the scale on row {row}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
        self.row = row


# --- Precondition errors ---

class PreconditionError(ScaleQuizError, ValueError):
    pass


class ZeroDegreeError(PreconditionError):
    def __init__(self, degree: int = 0) -> None:
        super().__init__(f"No such thing as scale degree {degree}. Use 1-based indexing.")
        self.degree = degree


class UnderspecifiedRootError(PreconditionError):
    def __init__(self) -> None:
        super().__init__(
            "Scale degree derivation would produce a note without a pitch and without a name. "
            "The root has no pitch and no unique spelling."
        )


class MissingTonicError(PreconditionError):
    def __init__(self, scale_text: str) -> None:
        super().__init__(f"Scale '{scale_text}' must start with degree 1 to be realised")
        self.scale_text = scale_text


class SamplingError(PreconditionError):
    pass


class TooManySamplesError(SamplingError):
    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"Too many samples requested! ({requested} requested, {available} available)")
        self.requested = requested
        self.available = available


class NoScalesLoadedError(SamplingError):
    def __init__(self, detail: str = "No scales found while generating session!") -> None:
        super().__init__(detail)


class SessionExhaustedError(PreconditionError):
    def __init__(self) -> None:
        super().__init__("Tried printing next question when there are none left!")


# --- Access errors ---

class NoteAccessError(ScaleQuizError, LookupError):
    pass


class NoPitchInformationError(NoteAccessError):
    def __init__(self) -> None:
        super().__init__("Trying to get the pitch of a Note without pitch information.")


class NoNameInformationError(NoteAccessError):
    def __init__(self) -> None:
        super().__init__("Trying to get the name of a Note without name information.")


class NoNoteInformationError(NoteAccessError):
    def __init__(self, detail: str = "This Note has no pitch or name information!") -> None:
        super().__init__(detail)


# --- Output ---

class ResultsFileError(ScaleQuizError, OSError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Unable to write the results file: {path}")
        self.path = path
