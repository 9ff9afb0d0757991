"""Show/hide state for the all-entries panel."""

from enum import Enum


class PanelVisibility(str, Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


class SectionToggle:
    """Two-state toggle for a page panel. Starts hidden."""

    def __init__(self):
        self.state = PanelVisibility.HIDDEN

    @property
    def is_visible(self) -> bool:
        return self.state is PanelVisibility.VISIBLE

    def toggle(self) -> PanelVisibility:
        """Flip visibility and return the new state."""
        if self.state is PanelVisibility.HIDDEN:
            self.state = PanelVisibility.VISIBLE
        else:
            self.state = PanelVisibility.HIDDEN
        return self.state

    def reset(self):
        """Hide the panel again."""
        self.state = PanelVisibility.HIDDEN
