################################################################################
# © Copyright 2024 Zapata Computing Inc.
################################################################################

import typing as t
import warnings
from typing import overload

from .... import exceptions

# One of inquirer's transitive dependencies shows DeprecationWarnings related to
# invalid usage of distutils. See: https://github.com/fmoo/python-editor/issues/35
warnings.filterwarnings("ignore", module="editor")

import inquirer  # type: ignore # noqa
from inquirer import errors  # type: ignore # noqa

SINGLE_INPUT = "single_input"


ChoiceID = str
T = t.TypeVar("T")

# Returns an error message if the value is invalid, None otherwise.
StrValidator = t.Callable[[str], t.Optional[str]]


class Prompter:
    """This is the last layer before handing off the interaction to ``inquirer``.

    ``inquirer`` is a 3rd-party library.

    Given it's our system's boundary it would be nice to write tests that perform real
    stdin/stdout IO, but simulating arrow key strokes is very tricky!
    ATM only the logic around ``inquirer`` is covered by tests.
    """

    @overload
    def choice(
        self,
        choices: t.Sequence[ChoiceID],
        message: str,
        default: t.Optional[str] = None,
    ) -> ChoiceID:
        ...

    @overload
    def choice(
        self,
        choices: t.Sequence[t.Tuple[ChoiceID, T]],
        message: str,
        default: t.Optional[str] = None,
    ) -> T:
        ...

    def choice(
        self,
        choices: t.Sequence[t.Union[ChoiceID, t.Tuple[ChoiceID, T]]],
        message: str,
        default: t.Optional[str] = None,
    ) -> t.Union[ChoiceID, T]:
        """Presents the user a choice and returns what they selected.

        If only one option is available, the user is prompted to confirm that this is
        the intended outcome and, if so, that option is selected automatically.

        Args:
            choices: The list of choices to present to the user. If this is of the shape
                ``(label, value)`` then the ``label`` is shown to the user, but
                ``value`` is what is returned.
            message: The message to prompt the user.
            default: The value to return as the default, if the user doesn't choose
                anything.

        Returns:
            The item the user chose, either a ChoiceID or an object if ``choices`` was
                a tuple.

        Raises:
            NoOptionsAvailableError: if ``choices`` is empty.
            UserCancelledPrompt: if the user cancels the prompt.
        """
        # If there are no choices, report it to the user and exit.
        if len(choices) == 0:
            raise exceptions.NoOptionsAvailableError(message)

        # If there's only one choice, select it automatically and confirm with the user
        # that that's what they want to do.
        if len(choices) == 1:
            return self._handle_single_option(message, choices[0])

        question = inquirer.List(
            SINGLE_INPUT,
            message=message,
            choices=choices,
            default=default,
            carousel=True,
        )
        answers = inquirer.prompt([question])

        # If the user cancels the prompt, via ctrl-c, answers will be `None`.
        if answers is None:
            raise exceptions.UserCancelledPrompt(f"User cancelled {message} prompt")

        return answers[SINGLE_INPUT]

    def confirm(self, message: str, default: bool) -> bool:
        """Ask the user for confirmation.

        Args:
            message: The message to prompt the user.
            default: The value to return as the default.

        Returns:
            The result from the prompt.

        Raises:
            UserCancelledPrompt: if the user cancels the prompt.
        """
        answer = inquirer.confirm(message, default=default)

        # If the user cancels the prompt, via ctrl-c, answers will be `None`.
        if answer is None:
            raise exceptions.UserCancelledPrompt(f"User cancelled {message} prompt")

        # Fixing typing issues from inquirer
        assert isinstance(answer, bool)

        return answer

    def ask_for_str(
        self,
        message: str,
        default: t.Optional[str] = None,
        validator: t.Optional[StrValidator] = None,
    ) -> str:
        """Asks the user to enter a string.

        Args:
            message: The message to prompt the user.
            default: The value to return as the default, if the user doesn't type
                anything.
            validator: Called with the user's input. If it returns a message, the
                message is shown and the prompt asks again.

        Returns:
            the string typed in by the user, stripped of surrounding whitespace.

        Raises:
            UserCancelledPrompt: if the user cancels the prompt.
        """

        def validate(_, current):
            if validator is None:
                return True

            reason = validator(current.strip())
            if reason is not None:
                raise errors.ValidationError("", reason=reason)

            return True

        question = inquirer.Text(
            name=SINGLE_INPUT, message=message, default=default, validate=validate
        )

        answers = inquirer.prompt([question])

        # If the user cancels the prompt, via ctrl-c, answers will be `None`.
        if answers is None:
            raise exceptions.UserCancelledPrompt(f"User cancelled {message} prompt")

        return answers[SINGLE_INPUT].strip()

    def _handle_single_option(
        self, message: str, choice: t.Union[ChoiceID, t.Tuple[ChoiceID, T]]
    ) -> t.Union[ChoiceID, T]:
        """Prompt for confirmation.

        This method exists to avoid the scenario of asking a user to choose between 1
        option.
        """
        name: ChoiceID
        value: t.Union[ChoiceID, T]
        # When the choice is a tuple, we unpack the display name and the returned value.
        # Otherwise, the choice is a ChoiceID and should be used as both the display
        # name and the returned value.
        if isinstance(choice, tuple):
            name, value = choice
        else:
            name, value = choice, choice

        if not self.confirm(
            f"{message} - only one option is available. Proceed with {name}?",
            default=True,
        ):
            raise exceptions.UserCancelledPrompt(f"User cancelled {message} prompt")
        return value
