"""Socratic tutor dialogue shown after a failed simulation."""

import logging
from typing import Optional, Sequence

from src.game_manager.config import TUTOR_ADVANCE_DELAY_SECONDS
from src.game_manager.placement_rules import ValidationError
from src.game_manager.scheduler import ScheduledCall, Scheduler
from src.game_manager.tutor_content import (
    SOCRATIC_DIALOGUE,
    DialogueOption,
    DialogueStep,
)

logger = logging.getLogger(__name__)


class TutorDialogue:
    """Walks the player through a multiple-choice script.

    A correct answer moves on to the next step after a short pause; a wrong
    answer shows its response and waits for :meth:`retry`. The dialogue is
    finished once the last step has been answered correctly.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        steps: Optional[Sequence[DialogueStep]] = None,
        advance_delay: float = TUTOR_ADVANCE_DELAY_SECONDS,
    ):
        self.scheduler = scheduler
        self.steps = tuple(
            SOCRATIC_DIALOGUE["metal_blockage"] if steps is None else steps
        )
        if not self.steps:
            raise ValueError("Dialogue needs at least one step")
        self.advance_delay = advance_delay
        self.step_index = 0
        self.selected_option: Optional[int] = None
        self._pending_advance: Optional[ScheduledCall] = None

    @property
    def current_step(self) -> DialogueStep:
        return self.steps[self.step_index]

    @property
    def is_last_step(self) -> bool:
        return self.step_index == len(self.steps) - 1

    @property
    def response(self) -> Optional[str]:
        """Response text for the selected option, if any."""
        if self.selected_option is None:
            return None
        return self.current_step.options[self.selected_option].response

    @property
    def is_finished(self) -> bool:
        if not self.is_last_step or self.selected_option is None:
            return False
        return self.current_step.options[self.selected_option].is_correct

    def choose(self, option_index: int) -> DialogueOption:
        """Answer the current step.

        Raises:
            ValidationError: If an answer is already selected or the index
                is out of range.
        """
        if self.selected_option is not None:
            raise ValidationError(
                f"Step {self.current_step.step} already answered"
            )
        options = self.current_step.options
        if not 0 <= option_index < len(options):
            raise ValidationError(
                f"Option {option_index} out of range for step "
                f"{self.current_step.step} ({len(options)} options)"
            )

        option = options[option_index]
        self.selected_option = option_index
        logger.info(
            "Tutor step %d: chose %r (%s)",
            self.current_step.step,
            option.label,
            "correct" if option.is_correct else "incorrect",
        )

        if option.is_correct and not self.is_last_step:
            self._pending_advance = self.scheduler.call_later(
                self.advance_delay, self._advance
            )
        return option

    def retry(self):
        """Clear a wrong answer so the step can be answered again."""
        if self.selected_option is None:
            return
        if self.current_step.options[self.selected_option].is_correct:
            raise ValidationError("Cannot retry a correctly answered step")
        self.selected_option = None

    def restart(self):
        """Rewind to the first step, dropping any pending advance."""
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None
        self.step_index = 0
        self.selected_option = None

    def _advance(self):
        self._pending_advance = None
        if self.is_last_step:
            return
        self.step_index += 1
        self.selected_option = None
        logger.debug("Tutor advanced to step %d", self.current_step.step)
