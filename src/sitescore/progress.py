"""Progress tracking for the analysis pipeline."""

import logging

from sitescore.constants import STEP_DESCRIPTIONS, TOTAL_STEPS
from sitescore.models import ProgressEvent
from sitescore.utils import round_half_up

logger = logging.getLogger(__name__)


class ProgressEmitter:
    """Turns pipeline step transitions into progress events.

    Steps run from 0 (init) to TOTAL_STEPS (complete) and must be reported
    in strictly increasing order, each at most once, so percentages never
    go backwards.
    """

    def __init__(self, total_steps: int = TOTAL_STEPS):
        self.total_steps = total_steps
        self.current_step = -1

    def percentage(self, step: int) -> int:
        return round_half_up(step / self.total_steps * 100)

    def advance(self, step: int) -> ProgressEvent:
        """Move to a step and build its notification.

        Args:
            step: Step index, greater than the previous one

        Returns:
            ProgressEvent for the step

        Raises:
            ValueError: If the step is out of range or not increasing
        """
        if not 0 <= step <= self.total_steps:
            raise ValueError(f"Step {step} outside 0..{self.total_steps}")
        if step <= self.current_step:
            raise ValueError(f"Step {step} reported after step {self.current_step}")

        self.current_step = step
        event = ProgressEvent(progress=self.percentage(step), step=step)
        logger.debug(f"[{event.progress}%] {STEP_DESCRIPTIONS.get(step, f'Step {step}')}")
        return event
